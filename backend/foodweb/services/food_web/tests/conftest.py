"""
Test Fixtures - 测试夹具

提供食物网测试共享的物种与捕食关系。
"""

import pytest

from ..store import FoodWebStore, build_store


# ============================================================================
# Food Webs
# ============================================================================

@pytest.fixture
def grass_chain() -> FoodWebStore:
    """Grass(0) ← Rabbit(1) ← Fox(2)"""
    store = build_store(["Grass", "Rabbit", "Fox"])
    store.add_predation(1, 0)
    store.add_predation(2, 1)
    return store


@pytest.fixture
def meadow() -> FoodWebStore:
    """较完整的草地食物网

    0 Grass, 1 Clover       生产者
    2 Rabbit  吃 Grass, Clover
    3 Mouse   吃 Grass
    4 Snake   吃 Mouse
    5 Hawk    吃 Snake, Mouse, Rabbit
    6 Bear    吃 Rabbit, Clover
    """
    store = build_store(["Grass", "Clover", "Rabbit", "Mouse", "Snake", "Hawk", "Bear"])
    for pred, prey in [
        (2, 0), (2, 1),
        (3, 0),
        (4, 3),
        (5, 4), (5, 3), (5, 2),
        (6, 2), (6, 1),
    ]:
        store.add_predation(pred, prey)
    return store


@pytest.fixture
def empty_store() -> FoodWebStore:
    return build_store([])
