"""
Trophic Analysis - 营养级分析

1. trophic_heights - 不动点松弛计算营养级高度
2. classify_vores  - 基于直接猎物的一跳食性分类
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from .errors import CycleDetectedError

if TYPE_CHECKING:
    from .store import FoodWebStore

logger = logging.getLogger(__name__)


class VoreType(Enum):
    """食性类型"""
    PRODUCER = "producer"     # 无猎物
    HERBIVORE = "herbivore"   # 直接猎物全部是生产者
    CARNIVORE = "carnivore"   # 直接猎物都不是生产者
    OMNIVORE = "omnivore"     # 两者皆有


@dataclass
class VoreClassification:
    """食性分类结果

    四个列表均按存储顺序排列；types 与物种索引一一对应。
    """
    producers: list[str] = field(default_factory=list)
    herbivores: list[str] = field(default_factory=list)
    omnivores: list[str] = field(default_factory=list)
    carnivores: list[str] = field(default_factory=list)
    types: list[VoreType] = field(default_factory=list)

    def names_of(self, vore: VoreType) -> list[str]:
        return {
            VoreType.PRODUCER: self.producers,
            VoreType.HERBIVORE: self.herbivores,
            VoreType.OMNIVORE: self.omnivores,
            VoreType.CARNIVORE: self.carnivores,
        }[vore]


def trophic_heights(store: "FoodWebStore") -> list[int]:
    """计算每个物种的营养级高度（按索引）

    height(i) = 0                         若 i 没有猎物
              = 1 + max(height(prey))     否则

    从全 0 出发按存储顺序反复松弛，直到一整轮没有任何变化。
    无环时 N 个物种至多 N 轮即可稳定（最后一轮用于确认），
    超过 N + 1 轮仍在变化说明存在捕食环。

    Raises:
        CycleDetectedError: 高度未在限定轮数内收敛
    """
    prey_lists = store.prey_lists()
    heights = [0] * len(prey_lists)
    max_passes = len(prey_lists) + 1

    for pass_index in range(1, max_passes + 1):
        changed = False
        for i, prey in enumerate(prey_lists):
            new_height = 1 + max(heights[p] for p in prey) if prey else 0
            if new_height != heights[i]:
                heights[i] = new_height
                changed = True
        if not changed:
            logger.debug(f"[营养级] 高度在第 {pass_index} 轮收敛")
            return heights

    logger.warning(f"[营养级] {max_passes} 轮松弛后仍未收敛，疑似捕食环")
    raise CycleDetectedError(max_passes)


def trophic_heights_by_name(store: "FoodWebStore") -> dict[str, int]:
    """物种名 → 营养级高度

    名称不唯一时后出现的物种覆盖先出现的，需要逐个物种结果请用 trophic_heights。
    """
    return dict(zip(store.names(), trophic_heights(store)))


def classify_vores(store: "FoodWebStore") -> VoreClassification:
    """按直接猎物划分食性

    只看一跳：只吃草食动物的物种归为肉食动物，不做递归的营养级推断。
    """
    names = store.names()
    prey_lists = store.prey_lists()
    is_producer = [not prey for prey in prey_lists]

    result = VoreClassification()
    for i, prey in enumerate(prey_lists):
        if not prey:
            vore = VoreType.PRODUCER
        else:
            producer_prey = sum(1 for p in prey if is_producer[p])
            if producer_prey == len(prey):
                vore = VoreType.HERBIVORE
            elif producer_prey == 0:
                vore = VoreType.CARNIVORE
            else:
                vore = VoreType.OMNIVORE
        result.types.append(vore)
        result.names_of(vore).append(names[i])

    return result
