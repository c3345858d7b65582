"""Indonesian display formatting helpers for UnitLedger."""

from __future__ import annotations

import math
from datetime import date

__all__ = [
    "format_amount",
    "format_currency",
    "format_long_date",
    "format_medium_date",
    "format_short_date",
    "format_signed_amount",
]

_MONTHS_SHORT = ("Jan", "Feb", "Mar", "Apr", "Mei", "Jun", "Jul", "Agu", "Sep", "Okt", "Nov", "Des")
_MONTHS_LONG = (
    "Januari",
    "Februari",
    "Maret",
    "April",
    "Mei",
    "Juni",
    "Juli",
    "Agustus",
    "September",
    "Oktober",
    "November",
    "Desember",
)


def format_amount(value: float) -> str:
    """Format a number with id-ID grouping, e.g. ``3.500.000`` or ``1.234,5``."""

    number = float(value)
    if math.isnan(number):
        return "NaN"
    rounded = round(number, 3) or 0.0
    text = f"{rounded:,.3f}".rstrip("0").rstrip(".")
    return text.replace(",", "_").replace(".", ",").replace("_", ".")


def format_currency(value: float) -> str:
    return f"Rp {format_amount(value)}"


def format_signed_amount(value: float, is_income: bool) -> str:
    sign = "+" if is_income else "-"
    return f"{sign}{format_amount(value)}"


def _parse(value: str | date) -> date | None:
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError:
        return None


def format_short_date(value: str | date) -> str:
    """Return ``01 Okt`` style labels used on trend charts."""

    parsed = _parse(value)
    if parsed is None:
        return str(value)
    return f"{parsed.day:02d} {_MONTHS_SHORT[parsed.month - 1]}"


def format_medium_date(value: str | date) -> str:
    parsed = _parse(value)
    if parsed is None:
        return str(value)
    return f"{parsed.day} {_MONTHS_SHORT[parsed.month - 1]} {parsed.year}"


def format_long_date(value: str | date) -> str:
    parsed = _parse(value)
    if parsed is None:
        return str(value)
    return f"{parsed.day} {_MONTHS_LONG[parsed.month - 1]} {parsed.year}"
