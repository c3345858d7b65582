"""Filtering and ordering helpers for the transaction list view."""

from __future__ import annotations

from typing import Iterable

from core.models import Transaction

__all__ = ["filter_transactions", "has_active_filters"]


def has_active_filters(
    category: str | None = None,
    start_date: str | None = None,
    end_date: str | None = None,
) -> bool:
    return bool(category or start_date or end_date)


def filter_transactions(
    transactions: Iterable[Transaction],
    category: str | None = None,
    start_date: str | None = None,
    end_date: str | None = None,
) -> list[Transaction]:
    """Return transactions matching every active filter, newest first.

    Date bounds are inclusive and compared as ISO ``YYYY-MM-DD`` strings.
    Empty filters are ignored. The sort is stable, so same-day transactions
    keep their original relative order.
    """

    result = list(transactions)

    if category:
        result = [t for t in result if t.category == category]
    if start_date:
        result = [t for t in result if t.date >= start_date]
    if end_date:
        result = [t for t in result if t.date <= end_date]

    return sorted(result, key=lambda t: t.date, reverse=True)
