"""食物网结构查询 (Food Web Queries)

所有查询都是当前食物网状态的纯函数，不修改存储。
结果按存储顺序返回物种名称，并列情况全部保留。
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .matrix import (
    build_adjacency,
    incoming_edges,
    indices_at_max,
    out_degrees,
    predator_counts,
)

if TYPE_CHECKING:
    from .store import FoodWebStore


@dataclass
class FoodWebRelation:
    """单个物种的捕食关系"""
    name: str
    prey_names: list[str] = field(default_factory=list)  # 按添加顺序，含重复

    @property
    def is_producer(self) -> bool:
        return not self.prey_names


def list_relations(store: "FoodWebStore") -> list[FoodWebRelation]:
    """列出每个物种及其直接猎物"""
    names = store.names()
    return [
        FoodWebRelation(name=names[i], prey_names=[names[p] for p in prey])
        for i, prey in enumerate(store.prey_lists())
    ]


def apex_predators(store: "FoodWebStore") -> list[str]:
    """顶级捕食者：从未出现在任何猎物列表中的物种

    与自身是否有猎物无关；自捕食的物种不算顶级捕食者。
    """
    names = store.names()
    incoming = incoming_edges(build_adjacency(store))
    return [names[i] for i in range(len(names)) if incoming[i] == 0]


def producers(store: "FoodWebStore") -> list[str]:
    """生产者：当前没有任何猎物的物种"""
    return [
        name for name, prey in zip(store.names(), store.prey_lists())
        if not prey
    ]


def most_flexible_eaters(store: "FoodWebStore") -> list[str]:
    """猎物边数（含重复）最多的物种

    全部物种都没有猎物时，最大值为 0，所有物种都入选。
    """
    names = store.names()
    return [names[i] for i in indices_at_max(out_degrees(build_adjacency(store)))]


def tastiest_food(store: "FoodWebStore") -> list[str]:
    """被最多不同捕食者（不含自身）捕食的物种"""
    names = store.names()
    return [names[i] for i in indices_at_max(predator_counts(build_adjacency(store)))]
