"""
FoodWeb - 食物网分析

在内存中维护捕食/被捕食有向图，回答结构查询（顶级捕食者、生产者、
营养级高度、食性分类等），并支持带重新编号的物种灭绝。
"""

from .models import FoodWebConfig, Organism
from .services.food_web import (
    CycleDetectedError,
    FoodWebAnalysis,
    FoodWebAnalyzer,
    FoodWebError,
    FoodWebStore,
    InvalidIndexError,
    VoreClassification,
    VoreType,
    build_store,
)

__all__ = [
    "FoodWebConfig",
    "Organism",
    "FoodWebStore",
    "build_store",
    "FoodWebAnalysis",
    "FoodWebAnalyzer",
    "VoreClassification",
    "VoreType",
    "FoodWebError",
    "InvalidIndexError",
    "CycleDetectedError",
]
