"""Aggregation helpers deriving dashboard figures from the transaction list.

Every function here is a pure reduction over a sequence of
:class:`~core.models.Transaction` records. Sums deliberately keep ``NaN``
values (``skipna=False``) so a malformed amount shows up in the totals
instead of being silently dropped.
"""

from __future__ import annotations

from typing import Iterable, Sequence

import pandas as pd

from config.categories import BUSINESS_UNITS
from core.formatting import format_short_date
from core.models import FinancialSummary, Transaction, TrendPoint, UnitPerformance

__all__ = [
    "TREND_WINDOW",
    "build_category_breakdown",
    "build_daily_trend",
    "build_expense_breakdown",
    "build_income_breakdown",
    "build_unit_performance",
    "compute_summary",
    "transactions_frame",
]

TREND_WINDOW = 7

_COLUMNS = ["id", "date", "description", "amount", "type", "category"]


def transactions_frame(transactions: Iterable[Transaction]) -> pd.DataFrame:
    """Return the transactions as a DataFrame in their original order."""

    records = [transaction.to_dict() for transaction in transactions]
    frame = pd.DataFrame.from_records(records, columns=_COLUMNS)
    frame["amount"] = frame["amount"].astype(float)
    return frame


def _total(values: pd.Series) -> float:
    return float(values.sum(skipna=False))


def compute_summary(transactions: Sequence[Transaction]) -> FinancialSummary:
    """Return total income, total expense and their difference."""

    frame = transactions_frame(transactions)
    is_income = frame["type"] == "income"
    total_income = _total(frame.loc[is_income, "amount"])
    total_expense = _total(frame.loc[~is_income, "amount"])
    return {
        "total_income": total_income,
        "total_expense": total_expense,
        "balance": total_income - total_expense,
    }


def build_category_breakdown(transactions: Sequence[Transaction], kind: str) -> dict[str, float]:
    """Sum amounts per category for one transaction type.

    Categories without transactions are omitted; keys follow first appearance.
    """

    frame = transactions_frame(transactions)
    subset = frame[frame["type"] == kind]
    if subset.empty:
        return {}

    totals = subset.groupby("category", sort=False)["amount"].agg(_total)
    return {str(category): float(amount) for category, amount in totals.items()}


def build_income_breakdown(transactions: Sequence[Transaction]) -> dict[str, float]:
    return build_category_breakdown(transactions, "income")


def build_expense_breakdown(transactions: Sequence[Transaction]) -> dict[str, float]:
    return build_category_breakdown(transactions, "expense")


def build_unit_performance(
    transactions: Sequence[Transaction],
    units: Sequence[str] = BUSINESS_UNITS,
) -> list[UnitPerformance]:
    """Return income, expense and profit per business unit in fixed order.

    A unit matches on the category name alone, so an income and an expense
    sharing the same category both count towards that unit.
    """

    frame = transactions_frame(transactions)
    is_income = frame["type"] == "income"
    is_expense = frame["type"] == "expense"

    rows: list[UnitPerformance] = []
    for unit in units:
        in_unit = frame["category"] == unit
        income = _total(frame.loc[in_unit & is_income, "amount"])
        expense = _total(frame.loc[in_unit & is_expense, "amount"])
        rows.append(
            {
                "name": unit,
                "income": income,
                "expense": expense,
                "profit": income - expense,
                "has_data": income > 0 or expense > 0,
            }
        )
    return rows


def build_daily_trend(transactions: Sequence[Transaction], limit: int = TREND_WINDOW) -> list[TrendPoint]:
    """Return per-date income/expense totals for the last ``limit`` dates.

    Dates are grouped by their exact string and sorted ascending; the window
    is taken by sort order, not by calendar distance.
    """

    frame = transactions_frame(transactions)
    if frame.empty:
        return []

    is_income = frame["type"] == "income"
    daily = pd.DataFrame(
        {
            "date": frame["date"],
            "income": frame["amount"].where(is_income, 0.0),
            "expense": frame["amount"].where(~is_income, 0.0),
        }
    )
    grouped = daily.groupby("date", sort=True).agg({"income": _total, "expense": _total})
    recent = grouped.tail(limit) if limit > 0 else grouped.iloc[0:0]

    return [
        {
            "date": str(day),
            "label": format_short_date(str(day)),
            "income": float(row["income"]),
            "expense": float(row["expense"]),
        }
        for day, row in recent.iterrows()
    ]
