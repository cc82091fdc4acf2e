from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Organism(BaseModel):
    """食物网中的一个物种节点"""
    model_config = ConfigDict(extra="ignore")

    # 物种名称（不要求唯一）
    name: str

    # ========== 捕食关系 ==========
    # 该物种捕食的物种索引（指向同一食物网中的位置）
    # 示例: [0, 2, 0] 表示捕食 0 号和 2 号物种，允许重复与自指
    prey_indices: list[int] = Field(default_factory=list)
