from __future__ import annotations

import logging
from typing import Sequence

from ...models.config import FoodWebConfig
from ..food_web.analyzer import FoodWebAnalysis
from ..food_web.queries import FoodWebRelation
from ..food_web.trophic import VoreClassification

logger = logging.getLogger(__name__)


class FoodWebReportBuilder:
    """Renders a FoodWebAnalysis as the plain-text console report."""

    def __init__(self, config: FoodWebConfig | None = None) -> None:
        self.config = config or FoodWebConfig()

    def build(self, analysis: FoodWebAnalysis, updated: bool = False) -> str:
        """生成完整报告，每个分区以空行结束。"""
        prefix = self.config.updated_prefix if updated else ""
        sections = [
            (f"{prefix}Food Web Predators & Prey:", self._relation_lines(analysis.relations)),
            (f"{prefix}Apex Predators:", self._name_lines(analysis.apex_predators)),
            (f"{prefix}Producers:", self._name_lines(analysis.producers)),
            (f"{prefix}Most Flexible Eaters:", self._name_lines(analysis.most_flexible_eaters)),
            (f"{prefix}Tastiest Food:", self._name_lines(analysis.tastiest_food)),
            (f"{prefix}Food Web Heights:", self._height_lines(analysis.height_entries)),
            (f"{prefix}Vore Types:", self._vore_lines(analysis.vores)),
        ]

        lines: list[str] = []
        for title, body in sections:
            lines.append(title)
            lines.extend(body)
            lines.append("")

        logger.debug(f"[ReportBuilder] 生成报告 {len(sections)} 个分区, updated={updated}")
        return "\n".join(lines) + "\n"

    # ========== 分区渲染 ==========

    def _relation_lines(self, relations: Sequence[FoodWebRelation]) -> list[str]:
        pad = " " * self.config.report_indent
        lines = []
        for rel in relations:
            if rel.prey_names:
                lines.append(f"{pad}{rel.name} eats {', '.join(rel.prey_names)}")
            else:
                lines.append(f"{pad}{rel.name}")
        return lines

    def _name_lines(self, names: Sequence[str], indent: int | None = None) -> list[str]:
        pad = " " * (self.config.report_indent if indent is None else indent)
        return [f"{pad}{name}" for name in names]

    def _height_lines(self, entries: Sequence[tuple[str, int]]) -> list[str]:
        pad = " " * self.config.report_indent
        return [f"{pad}{name}: {height}" for name, height in entries]

    def _vore_lines(self, vores: VoreClassification) -> list[str]:
        pad = " " * self.config.report_indent
        lines = []
        for label, names in (
            ("Producers", vores.producers),
            ("Herbivores", vores.herbivores),
            ("Omnivores", vores.omnivores),
            ("Carnivores", vores.carnivores),
        ):
            lines.append(f"{pad}{label}:")
            lines.extend(self._name_lines(names, indent=self.config.vore_indent))
        return lines
