"""食物网分析服务 (Food Web Analyzer)

对当前食物网一次性执行全部结构查询，汇总为 FoodWebAnalysis。

设计原则：
- 只读，不修改存储
- 灭绝等修改之后需要重新调用 analyze，旧结果中的索引已失效
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .queries import (
    FoodWebRelation,
    apex_predators,
    list_relations,
    most_flexible_eaters,
    producers,
    tastiest_food,
)
from .trophic import VoreClassification, classify_vores, trophic_heights

if TYPE_CHECKING:
    from .store import FoodWebStore

logger = logging.getLogger(__name__)


@dataclass
class FoodWebAnalysis:
    """食物网分析结果"""
    total_organisms: int
    total_links: int  # 含重复边
    relations: list[FoodWebRelation] = field(default_factory=list)
    apex_predators: list[str] = field(default_factory=list)
    producers: list[str] = field(default_factory=list)
    most_flexible_eaters: list[str] = field(default_factory=list)
    tastiest_food: list[str] = field(default_factory=list)
    # (物种名, 高度)，按存储顺序；名称可能重复，因此不用字典
    height_entries: list[tuple[str, int]] = field(default_factory=list)
    vores: VoreClassification = field(default_factory=VoreClassification)

    @property
    def heights(self) -> dict[str, int]:
        """物种名 → 营养级高度"""
        return dict(self.height_entries)

    @property
    def max_height(self) -> int:
        return max((h for _, h in self.height_entries), default=0)


class FoodWebAnalyzer:
    """食物网分析服务"""

    def __init__(self):
        self._logger = logging.getLogger(__name__)

    def analyze(self, store: "FoodWebStore") -> FoodWebAnalysis:
        """执行全部查询

        Raises:
            CycleDetectedError: 营养级高度无法收敛
        """
        names = store.names()
        heights = trophic_heights(store)

        analysis = FoodWebAnalysis(
            total_organisms=store.size,
            total_links=store.total_links,
            relations=list_relations(store),
            apex_predators=apex_predators(store),
            producers=producers(store),
            most_flexible_eaters=most_flexible_eaters(store),
            tastiest_food=tastiest_food(store),
            height_entries=list(zip(names, heights)),
            vores=classify_vores(store),
        )

        self._logger.debug(
            f"[食物网分析] 物种 {analysis.total_organisms} 个, 捕食边 {analysis.total_links} 条, "
            f"最大营养级高度 {analysis.max_height}"
        )
        return analysis


# 单例模式
_analyzer: FoodWebAnalyzer | None = None


def get_food_web_analyzer() -> FoodWebAnalyzer:
    """获取食物网分析服务单例"""
    global _analyzer
    if _analyzer is None:
        _analyzer = FoodWebAnalyzer()
    return _analyzer
