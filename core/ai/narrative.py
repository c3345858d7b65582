"""AI-generated financial narrative for UnitLedger.

The adapter builds a single templated prompt from the transaction list and
sends it to an OpenAI-compatible chat completions endpoint. Service failures
never reach the caller: they are logged and replaced by a fixed message.
"""

from __future__ import annotations

from typing import Callable, Protocol, Sequence

from openai import OpenAI, OpenAIError

from config.settings import Settings, get_settings
from core.formatting import format_signed_amount
from core.logging_setup import get_logger
from core.models import Transaction
from prompts import render_prompt

PROMPT_ANALYSIS = "analysis"
RECOMMENDATION_COUNT = 3
MAX_OUTPUT_TOKENS = 1500

MISSING_API_KEY_MESSAGE = (
    "API Key tidak ditemukan. Mohon pastikan API Key OpenAI sudah terkonfigurasi "
    "di Environment Variables atau .streamlit/secrets.toml."
)
EMPTY_RESPONSE_MESSAGE = "Maaf, tidak dapat menghasilkan analisis saat ini."
FAILURE_MESSAGE = "Terjadi kesalahan saat menghubungi layanan AI. Silakan coba lagi nanti."

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

logger = get_logger("unitledger.ai")


class NarrativeServiceError(RuntimeError):
    """Raised when the text-generation service request fails."""


class NarrativeService(Protocol):
    def summarize(self, transactions: Sequence[Transaction]) -> str: ...


def build_transaction_lines(transactions: Sequence[Transaction]) -> str:
    return "\n".join(
        f"- {t.date}: {t.description} ({format_signed_amount(t.amount, t.is_income)}) [{t.category}]"
        for t in transactions
    )


def build_analysis_prompt(transactions: Sequence[Transaction]) -> str:
    return render_prompt(
        PROMPT_ANALYSIS,
        transaction_summary=build_transaction_lines(transactions),
        recommendation_count=RECOMMENDATION_COUNT,
    )


class OpenAINarrativeService:
    """Single-shot narrative request against the chat completions API."""

    def __init__(self, client_factory: Callable[[], OpenAI], model: str) -> None:
        self._client_factory = client_factory
        self.model = model

    def summarize(self, transactions: Sequence[Transaction]) -> str:
        prompt = build_analysis_prompt(transactions)
        try:
            client = self._client_factory()
            response = client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=MAX_OUTPUT_TOKENS,
            )
        except OpenAIError as exc:
            raise NarrativeServiceError(f"OpenAI API error: {exc}") from exc

        try:
            return response.choices[0].message.content or ""
        except (AttributeError, IndexError, KeyError, TypeError) as exc:
            raise NarrativeServiceError("Unexpected response format from OpenAI API") from exc


def _default_client_factory(settings: Settings) -> Callable[[], OpenAI]:
    return lambda: OpenAI(**settings.openai_client_kwargs)


def analyze_financial_data(
    transactions: Sequence[Transaction],
    *,
    settings: Settings | None = None,
    service: NarrativeService | None = None,
    client_factory: Callable[[], OpenAI] | None = None,
) -> str:
    """Return an AI narrative for ``transactions`` or a fixed fallback message."""

    settings = settings or get_settings()
    if not settings.has_api_key:
        logger.warning("AI analysis requested without an API key")
        return MISSING_API_KEY_MESSAGE

    if service is None:
        service = OpenAINarrativeService(
            client_factory or _default_client_factory(settings),
            model=settings.openai_model,
        )

    logger.info("Requesting AI analysis for %d transactions", len(transactions))
    try:
        text = service.summarize(transactions)
    except NarrativeServiceError:
        logger.exception("Error calling the AI service")
        return FAILURE_MESSAGE

    return text or EMPTY_RESPONSE_MESSAGE
