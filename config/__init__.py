"""Application configuration utilities."""

from .categories import (
    BUSINESS_UNITS,
    CATEGORIES,
    EXPENSE_CATEGORIES,
    INCOME_CATEGORIES,
    INITIAL_TRANSACTIONS,
    TYPE_LABELS,
    available_categories,
    categories_for,
    type_label,
)
from .settings import DEFAULT_LEDGER_PATH, DEFAULT_OPENAI_MODEL, Settings, get_settings

__all__ = [
    "BUSINESS_UNITS",
    "CATEGORIES",
    "DEFAULT_LEDGER_PATH",
    "DEFAULT_OPENAI_MODEL",
    "EXPENSE_CATEGORIES",
    "INCOME_CATEGORIES",
    "INITIAL_TRANSACTIONS",
    "Settings",
    "TYPE_LABELS",
    "available_categories",
    "categories_for",
    "get_settings",
    "type_label",
]
