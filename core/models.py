"""Shared data model definitions for the UnitLedger dashboard."""

from __future__ import annotations

import math
import uuid
from dataclasses import asdict, dataclass
from datetime import date, datetime
from typing import Any, Callable, Mapping, TypedDict

from config.categories import TRANSACTION_TYPES, categories_for


@dataclass(frozen=True)
class Transaction:
    """One recorded income or expense event."""

    id: str
    date: str
    description: str
    amount: float
    type: str
    category: str

    @property
    def is_income(self) -> bool:
        return self.type == "income"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Transaction":
        """Rebuild a transaction from its persisted JSON shape.

        Values are not re-validated; a non-numeric amount becomes ``NaN``.
        """

        return cls(
            id=str(raw.get("id", "")),
            date=str(raw.get("date", "")),
            description=str(raw.get("description", "")),
            amount=_coerce_amount(raw.get("amount")),
            type=str(raw.get("type", "")),
            category=str(raw.get("category", "")),
        )


class FinancialSummary(TypedDict):
    total_income: float
    total_expense: float
    balance: float


class UnitPerformance(TypedDict):
    name: str
    income: float
    expense: float
    profit: float
    has_data: bool


class TrendPoint(TypedDict):
    date: str
    label: str
    income: float
    expense: float


class DashboardData(TypedDict):
    summary: FinancialSummary
    income_by_category: dict[str, float]
    expense_by_category: dict[str, float]
    unit_performance: list[UnitPerformance]
    daily_trend: list[TrendPoint]
    transaction_count: int


def _coerce_amount(value: Any) -> float:
    if isinstance(value, bool):
        return math.nan
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def _parse_positive_amount(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    amount = _coerce_amount(value)
    if not math.isfinite(amount) or amount <= 0:
        return None
    return amount


def _normalise_date(value: date | str | None) -> str | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    text = str(value).strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text).isoformat()
    except ValueError:
        return None


def new_transaction_id() -> str:
    return uuid.uuid4().hex


def create_transaction(
    *,
    type: str,
    amount: Any,
    category: str | None,
    date: date | str | None,
    description: str | None,
    id_factory: Callable[[], str] = new_transaction_id,
) -> Transaction | None:
    """Build a new transaction from add-transaction form input.

    Returns ``None`` when any field is missing or invalid; no record is
    created in that case.
    """

    if type not in TRANSACTION_TYPES:
        return None

    parsed_amount = _parse_positive_amount(amount)
    if parsed_amount is None:
        return None

    if not category or category not in categories_for(type):
        return None

    iso_date = _normalise_date(date)
    if iso_date is None:
        return None

    text = (description or "").strip()
    if not text:
        return None

    return Transaction(
        id=id_factory(),
        date=iso_date,
        description=text,
        amount=parsed_amount,
        type=type,
        category=category,
    )


__all__ = [
    "DashboardData",
    "FinancialSummary",
    "Transaction",
    "TrendPoint",
    "UnitPerformance",
    "create_transaction",
    "new_transaction_id",
]
