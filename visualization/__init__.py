"""Visualization utilities for UnitLedger dashboards."""

from .charts import build_category_chart, build_trend_chart, build_unit_chart
from .theme import theme_tokens

__all__ = [
    "build_category_chart",
    "build_trend_chart",
    "build_unit_chart",
    "theme_tokens",
]
