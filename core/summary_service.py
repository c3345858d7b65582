"""Core logic for assembling UnitLedger dashboard data."""

from __future__ import annotations

from typing import Sequence

from analytics.aggregation import (
    build_daily_trend,
    build_expense_breakdown,
    build_income_breakdown,
    build_unit_performance,
    compute_summary,
)
from core.models import DashboardData, Transaction

__all__ = ["prepare_dashboard_data"]


def prepare_dashboard_data(transactions: Sequence[Transaction]) -> DashboardData:
    return {
        "summary": compute_summary(transactions),
        "income_by_category": build_income_breakdown(transactions),
        "expense_by_category": build_expense_breakdown(transactions),
        "unit_performance": build_unit_performance(transactions),
        "daily_trend": build_daily_trend(transactions),
        "transaction_count": len(transactions),
    }
