"""AI-focused helpers for UnitLedger."""

from .narrative import (
    EMPTY_RESPONSE_MESSAGE,
    FAILURE_MESSAGE,
    MISSING_API_KEY_MESSAGE,
    NarrativeService,
    NarrativeServiceError,
    OpenAINarrativeService,
    analyze_financial_data,
    build_analysis_prompt,
    build_transaction_lines,
)

__all__ = [
    "EMPTY_RESPONSE_MESSAGE",
    "FAILURE_MESSAGE",
    "MISSING_API_KEY_MESSAGE",
    "NarrativeService",
    "NarrativeServiceError",
    "OpenAINarrativeService",
    "analyze_financial_data",
    "build_analysis_prompt",
    "build_transaction_lines",
]
