"""Static category tables and seed data for UnitLedger."""

from __future__ import annotations

from typing import Final, Literal

TransactionType = Literal["income", "expense"]

TRANSACTION_TYPES: Final[tuple[str, ...]] = ("income", "expense")

# Business units tracked independently for profit/loss, in display order.
BUSINESS_UNITS: Final[tuple[str, ...]] = (
    "Menjahit",
    "Las",
    "Doorsmeer",
    "Pangkas",
    "Pertanian Luar Tembok",
    "Hidroponik",
    "Tenun",
    "Miniatur",
)

INCOME_CATEGORIES: Final[tuple[str, ...]] = (*BUSINESS_UNITS, "Lainnya")
EXPENSE_CATEGORIES: Final[tuple[str, ...]] = (*BUSINESS_UNITS, "Operasional", "Lainnya")

CATEGORIES: Final[dict[str, tuple[str, ...]]] = {
    "income": INCOME_CATEGORIES,
    "expense": EXPENSE_CATEGORIES,
}

TYPE_LABELS: Final[dict[str, str]] = {
    "income": "Pemasukan",
    "expense": "Pengeluaran",
}

INITIAL_TRANSACTIONS: Final[tuple[dict[str, object], ...]] = (
    {
        "id": "1",
        "date": "2023-10-01",
        "description": "Jasa Las Pagar Besi",
        "amount": 3500000,
        "type": "income",
        "category": "Las",
    },
    {
        "id": "2",
        "date": "2023-10-02",
        "description": "Belanja Sabun & Wax Doorsmeer",
        "amount": 450000,
        "type": "expense",
        "category": "Doorsmeer",
    },
    {
        "id": "3",
        "date": "2023-10-05",
        "description": "Pendapatan Harian Pangkas",
        "amount": 350000,
        "type": "income",
        "category": "Pangkas",
    },
    {
        "id": "4",
        "date": "2023-10-10",
        "description": "Service Mesin Jahit",
        "amount": 150000,
        "type": "expense",
        "category": "Menjahit",
    },
    {
        "id": "5",
        "date": "2023-10-15",
        "description": "Borongan Jahit Seragam",
        "amount": 2500000,
        "type": "income",
        "category": "Menjahit",
    },
    {
        "id": "6",
        "date": "2023-10-18",
        "description": "Bayar Listrik Workshop",
        "amount": 500000,
        "type": "expense",
        "category": "Operasional",
    },
)


def categories_for(kind: str) -> tuple[str, ...]:
    """Return the allowed categories for a transaction type (empty when unknown)."""

    return CATEGORIES.get(kind, ())


def available_categories() -> list[str]:
    """Return the sorted union of income and expense categories."""

    return sorted(set(INCOME_CATEGORIES) | set(EXPENSE_CATEGORIES))


def type_label(kind: str) -> str:
    return TYPE_LABELS["income"] if kind == "income" else TYPE_LABELS["expense"]


__all__ = [
    "BUSINESS_UNITS",
    "CATEGORIES",
    "EXPENSE_CATEGORIES",
    "INCOME_CATEGORIES",
    "INITIAL_TRANSACTIONS",
    "TRANSACTION_TYPES",
    "TYPE_LABELS",
    "TransactionType",
    "available_categories",
    "categories_for",
    "type_label",
]
