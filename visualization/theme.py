"""Shared Plotly theme tokens for UnitLedger visualizations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ThemeTokens:
    label_color: str = "#475569"
    label_font: str = "Inter"
    label_size: int = 12
    income_green: str = "#10B981"
    expense_red: str = "#EF4444"
    brand_indigo: str = "#4F46E5"
    neutral_grey: str = "#94A3B8"
    neutral_white: str = "#FFFFFF"
    neutral_background: str = "rgba(148, 163, 184, 0.25)"
    expense_palette: tuple[str, ...] = (
        "#EF4444",
        "#F97316",
        "#EAB308",
        "#84CC16",
        "#06B6D4",
        "#6366F1",
        "#A855F7",
    )
    income_palette: tuple[str, ...] = (
        "#059669",
        "#10B981",
        "#34D399",
        "#6EE7B7",
        "#A7F3D0",
    )


_TOKENS = ThemeTokens()


def theme_tokens() -> ThemeTokens:
    """Return the shared visualization tokens."""

    return _TOKENS
