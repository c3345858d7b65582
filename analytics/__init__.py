"""Analytics helpers shared across UnitLedger services."""

from analytics.aggregation import (
    TREND_WINDOW,
    build_category_breakdown,
    build_daily_trend,
    build_expense_breakdown,
    build_income_breakdown,
    build_unit_performance,
    compute_summary,
    transactions_frame,
)
from analytics.filtering import filter_transactions, has_active_filters

__all__ = [
    "TREND_WINDOW",
    "build_category_breakdown",
    "build_daily_trend",
    "build_expense_breakdown",
    "build_income_breakdown",
    "build_unit_performance",
    "compute_summary",
    "filter_transactions",
    "has_active_filters",
    "transactions_frame",
]
