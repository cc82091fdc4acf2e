"""食物网错误类型"""
from __future__ import annotations


class FoodWebError(Exception):
    """食物网操作错误的基类"""
    pass


class InvalidIndexError(FoodWebError, IndexError):
    """物种索引越界（不在 [0, N) 范围内）

    抛出时食物网保持原样，不会出现部分修改。
    """

    def __init__(self, index: int, size: int, role: str = "index"):
        self.index = index
        self.size = size
        self.role = role
        super().__init__(f"{role} {index} 越界，有效范围为 [0, {size})")


class CycleDetectedError(FoodWebError):
    """营养级高度在限定轮数内未收敛（捕食关系存在环）"""

    def __init__(self, passes: int):
        self.passes = passes
        super().__init__(f"营养级高度在 {passes} 轮松弛后仍未收敛，捕食关系中存在环")
