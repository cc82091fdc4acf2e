"""捕食邻接矩阵 (Predation Adjacency Matrix)

将食物网快照转换为 N×N 的边计数矩阵，供基于度数的查询复用。

- 行：捕食者，列：猎物
- matrix[i, j] = i 的猎物列表中 j 出现的次数（重复边累加）
"""
from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from .store import FoodWebStore


def build_adjacency(store: "FoodWebStore") -> np.ndarray:
    """构建捕食边计数矩阵

    Returns:
        形状为 (N, N) 的 int64 矩阵，空食物网返回 (0, 0)
    """
    prey_lists = store.prey_lists()
    size = len(prey_lists)
    matrix = np.zeros((size, size), dtype=np.int64)

    for predator, prey_indices in enumerate(prey_lists):
        if prey_indices:
            # np.add.at 保证重复索引逐次累加
            np.add.at(matrix[predator], list(prey_indices), 1)

    return matrix


def out_degrees(matrix: np.ndarray) -> np.ndarray:
    """每个物种的猎物边数（含重复）"""
    return matrix.sum(axis=1)


def predator_counts(matrix: np.ndarray) -> np.ndarray:
    """每个物种被多少个不同的其他物种捕食

    同一捕食者的重复边只计一次，自捕食不计入。
    """
    eaten_by = matrix > 0
    np.fill_diagonal(eaten_by, False)
    return eaten_by.sum(axis=0)


def incoming_edges(matrix: np.ndarray) -> np.ndarray:
    """每个物种作为猎物出现的总次数（含自捕食与重复边）"""
    return matrix.sum(axis=0)


def indices_at_max(values: np.ndarray) -> list[int]:
    """取值等于最大值的全部索引（并列全部保留，按索引升序）"""
    if values.size == 0:
        return []
    return [int(i) for i in np.flatnonzero(values == values.max())]
