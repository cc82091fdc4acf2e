"""Report rendering."""

from .report_builder import FoodWebReportBuilder

__all__ = [
    "FoodWebReportBuilder",
]
