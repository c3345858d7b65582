"""Core domain package for the UnitLedger application.

Modules that depend on :mod:`analytics` (``core.summary_service`` and
``core.export``) are imported directly by callers, since ``analytics`` itself
builds on ``core.models``.
"""

from .ai.narrative import NarrativeServiceError, analyze_financial_data
from .models import (
    DashboardData,
    FinancialSummary,
    Transaction,
    TrendPoint,
    UnitPerformance,
    create_transaction,
)
from .store import JsonFileStorage, MemoryStorage, StoreLoadError, TransactionStore

__all__ = [
    "DashboardData",
    "FinancialSummary",
    "JsonFileStorage",
    "MemoryStorage",
    "NarrativeServiceError",
    "StoreLoadError",
    "Transaction",
    "TransactionStore",
    "TrendPoint",
    "UnitPerformance",
    "analyze_financial_data",
    "create_transaction",
]
