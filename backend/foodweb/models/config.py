from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class FoodWebConfig(BaseModel):
    """食物网报告配置 - 控制文本报告的版式"""
    model_config = ConfigDict(extra="ignore")

    # ========== 缩进 ==========
    # 各分区条目的缩进空格数
    report_indent: int = 2
    # 食性分类（Producers/Herbivores/...）下物种名的缩进空格数
    vore_indent: int = 4

    # ========== 标题 ==========
    # 灭绝后重新输出报告时的标题前缀
    updated_prefix: str = "UPDATED "
