"""
Food Web Module - 食物网模块

1. FoodWebStore - 物种与捕食边的存储，支持追加捕食关系与物种灭绝
2. 结构查询 - 顶级捕食者、生产者、最灵活捕食者、最受欢迎猎物
3. 营养级分析 - 营养级高度、一跳食性分类
4. FoodWebAnalyzer - 一次性汇总全部查询
"""

from .analyzer import FoodWebAnalysis, FoodWebAnalyzer, get_food_web_analyzer
from .errors import CycleDetectedError, FoodWebError, InvalidIndexError
from .queries import (
    FoodWebRelation,
    apex_predators,
    list_relations,
    most_flexible_eaters,
    producers,
    tastiest_food,
)
from .store import FoodWebStore, build_store
from .trophic import (
    VoreClassification,
    VoreType,
    classify_vores,
    trophic_heights,
    trophic_heights_by_name,
)

__all__ = [
    # Store
    "FoodWebStore",
    "build_store",
    # Errors
    "FoodWebError",
    "InvalidIndexError",
    "CycleDetectedError",
    # Queries
    "FoodWebRelation",
    "list_relations",
    "apex_predators",
    "producers",
    "most_flexible_eaters",
    "tastiest_food",
    # Trophic
    "VoreType",
    "VoreClassification",
    "trophic_heights",
    "trophic_heights_by_name",
    "classify_vores",
    # Analyzer
    "FoodWebAnalysis",
    "FoodWebAnalyzer",
    "get_food_web_analyzer",
]
