"""食物网存储 (Food Web Store)

持有有序的物种集合及每个物种的捕食边（指向同一集合的索引）。

核心功能：
1. 按名称列表构建食物网（无任何捕食边）
2. 追加捕食关系
3. 物种灭绝：删除节点、清理指向它的边并重新编号

不变量：
- 任意 prey_indices 中的值 v 始终满足 0 <= v < N
- 所有修改要么完整生效，要么（索引越界时）完全不生效
- 内部边列表从不外借，对外只返回元组或深拷贝
"""
from __future__ import annotations

import logging
import numbers
from typing import Iterator, Sequence

from ...models.organism import Organism
from .errors import InvalidIndexError

logger = logging.getLogger(__name__)


class FoodWebStore:
    """食物网存储

    物种序列与其长度作为一个整体维护，灭绝操作原地替换整个序列。
    """

    def __init__(self, organisms: Sequence[Organism] | None = None):
        self._organisms: list[Organism] = [
            org.model_copy(deep=True) for org in (organisms or [])
        ]
        size = len(self._organisms)
        for org in self._organisms:
            for prey in org.prey_indices:
                self._check_index(prey, size, "prey_index")

    @classmethod
    def from_names(cls, names: Sequence[str]) -> "FoodWebStore":
        """按名称顺序创建物种，初始无捕食关系"""
        store = cls()
        store._organisms = [Organism(name=name) for name in names]
        logger.debug(f"[食物网] 已创建 {len(store._organisms)} 个物种")
        return store

    # ========== 只读访问 ==========

    def __len__(self) -> int:
        return len(self._organisms)

    def __iter__(self) -> Iterator[Organism]:
        """按顺序迭代物种的副本"""
        for org in self._organisms:
            yield org.model_copy(deep=True)

    @property
    def size(self) -> int:
        return len(self._organisms)

    @property
    def is_empty(self) -> bool:
        return not self._organisms

    def names(self) -> list[str]:
        """所有物种名称（按索引顺序）"""
        return [org.name for org in self._organisms]

    def name_of(self, index: int) -> str:
        self._check_index(index, self.size)
        return self._organisms[index].name

    def prey_of(self, index: int) -> tuple[int, ...]:
        """某物种的猎物索引（按添加顺序，含重复）"""
        self._check_index(index, self.size)
        return tuple(self._organisms[index].prey_indices)

    def prey_lists(self) -> list[tuple[int, ...]]:
        """全部物种的猎物索引快照"""
        return [tuple(org.prey_indices) for org in self._organisms]

    def snapshot(self) -> list[Organism]:
        """物种列表的深拷贝"""
        return [org.model_copy(deep=True) for org in self._organisms]

    @property
    def total_links(self) -> int:
        """捕食边总数（重复边分别计数）"""
        return sum(len(org.prey_indices) for org in self._organisms)

    # ========== 修改操作 ==========

    def add_predation(self, predator_index: int, prey_index: int) -> None:
        """记录 predator 捕食 prey

        不去重，也不拒绝自捕食；两端索引都必须在 [0, N) 内。

        Raises:
            InvalidIndexError: 任一索引越界，食物网保持不变
        """
        self._check_index(predator_index, self.size, "predator_index")
        self._check_index(prey_index, self.size, "prey_index")

        self._organisms[predator_index].prey_indices.append(int(prey_index))
        logger.debug(
            f"[食物网] {self._organisms[predator_index].name}({predator_index}) "
            f"捕食 {self._organisms[prey_index].name}({prey_index})"
        )

    def remove_organism(self, index: int) -> Organism:
        """物种灭绝

        1. 删除所有物种中指向 index 的边（可能有多条）
        2. 大于 index 的边值减一
        3. 删除该物种，其后的物种依次前移
        猎物因此清空的物种自然成为生产者。

        Returns:
            被移除物种的副本

        Raises:
            InvalidIndexError: 索引越界，食物网保持不变
        """
        self._check_index(index, self.size)

        removed = self._organisms[index]
        survivors: list[Organism] = []
        emptied: list[str] = []

        # 先构建完整的新序列，最后一次性替换
        for i, org in enumerate(self._organisms):
            if i == index:
                continue
            new_prey = [
                prey - 1 if prey > index else prey
                for prey in org.prey_indices
                if prey != index
            ]
            if org.prey_indices and not new_prey:
                emptied.append(org.name)
            survivors.append(Organism(name=org.name, prey_indices=new_prey))

        self._organisms = survivors

        logger.info(f"[食物网] 物种灭绝: {removed.name}({index})，剩余 {len(survivors)} 个物种")
        if emptied:
            logger.info(f"[食物网] 以下物种失去全部猎物，成为生产者: {emptied}")

        return Organism(name=removed.name, prey_indices=list(removed.prey_indices))

    # ========== 内部方法 ==========

    @staticmethod
    def _check_index(index: int, size: int, role: str = "index") -> None:
        # bool 是 int 的子类，不接受 True/False 作为索引
        if isinstance(index, bool) or not isinstance(index, numbers.Integral):
            raise TypeError(f"{role} 必须是整数，收到 {type(index).__name__}")
        if not 0 <= index < size:
            raise InvalidIndexError(index, size, role)


def build_store(names: Sequence[str]) -> FoodWebStore:
    """按名称列表构建食物网"""
    return FoodWebStore.from_names(names)
