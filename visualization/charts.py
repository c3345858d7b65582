"""Plotly chart builders for the UnitLedger dashboard."""

from __future__ import annotations

from typing import Mapping, Sequence

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from core.formatting import format_currency
from core.models import TrendPoint, UnitPerformance

from .theme import theme_tokens

TOKENS = theme_tokens()

__all__ = [
    "build_category_chart",
    "build_trend_chart",
    "build_unit_chart",
]


def _empty_plotly_figure(message: str) -> go.Figure:
    fig = go.Figure()
    fig.update_layout(
        annotations=[
            dict(
                text=message,
                x=0.5,
                y=0.5,
                xref="paper",
                yref="paper",
                showarrow=False,
                font=dict(color=TOKENS.neutral_grey, size=14, family=TOKENS.label_font),
            )
        ],
        xaxis=dict(visible=False),
        yaxis=dict(visible=False),
        margin=dict(l=0, r=0, t=20, b=0),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig


def _cycle_palette(palette: Sequence[str], count: int) -> list[str]:
    if count <= len(palette):
        return list(palette[:count])
    repeats = (count // len(palette)) + 1
    return (list(palette) * repeats)[:count]


def build_unit_chart(unit: UnitPerformance) -> go.Figure:
    """Render an income-vs-expense donut for one business unit."""

    if not unit["has_data"]:
        return _empty_plotly_figure("Belum ada data")

    fig = go.Figure(
        go.Pie(
            labels=["Pemasukan", "Pengeluaran"],
            values=[unit["income"], unit["expense"]],
            hole=0.6,
            sort=False,
            marker=dict(
                colors=[TOKENS.income_green, TOKENS.expense_red],
                line=dict(color=TOKENS.neutral_white, width=2),
            ),
            customdata=[format_currency(unit["income"]), format_currency(unit["expense"])],
            hovertemplate="%{label}<br>%{customdata}<extra></extra>",
            textinfo="none",
        )
    )
    fig.update_layout(
        showlegend=False,
        height=180,
        margin=dict(l=0, r=0, t=0, b=0),
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig


def build_category_chart(breakdown: Mapping[str, float], kind: str = "expense") -> go.Figure:
    """Render a donut chart for income or expense distribution by category."""

    if not breakdown:
        return _empty_plotly_figure("Belum ada data")

    data = pd.DataFrame({"Category": list(breakdown.keys()), "Amount": list(breakdown.values())})
    data["Formatted"] = data["Amount"].map(format_currency)
    palette = TOKENS.income_palette if kind == "income" else TOKENS.expense_palette

    fig = px.pie(
        data,
        names="Category",
        values="Amount",
        hole=0.55,
        color="Category",
        color_discrete_sequence=_cycle_palette(palette, len(data)),
    )
    fig.update_traces(
        textposition="inside",
        texttemplate="%{percent:.0%}",
        customdata=data[["Formatted"]],
        hovertemplate="%{label}<br>%{customdata[0]}<extra></extra>",
        marker=dict(line=dict(color=TOKENS.neutral_white, width=2)),
    )
    fig.update_layout(
        margin=dict(l=0, r=0, t=0, b=0),
        legend=dict(
            title="",
            orientation="h",
            yanchor="top",
            y=-0.05,
            font=dict(color=TOKENS.label_color, family=TOKENS.label_font, size=TOKENS.label_size),
        ),
    )
    return fig


def build_trend_chart(trend: Sequence[TrendPoint]) -> go.Figure:
    """Render grouped income/expense bars for the recent daily trend."""

    if not trend:
        return _empty_plotly_figure("Belum ada transaksi.")

    labels = [point["label"] for point in trend]
    fig = go.Figure()
    for name, key, color in (
        ("Pemasukan", "income", TOKENS.income_green),
        ("Pengeluaran", "expense", TOKENS.expense_red),
    ):
        values = [point[key] for point in trend]
        fig.add_trace(
            go.Bar(
                x=labels,
                y=values,
                name=name,
                marker=dict(color=color),
                customdata=[format_currency(value) for value in values],
                hovertemplate=f"%{{x}}<br>{name}: %{{customdata}}<extra></extra>",
            )
        )

    fig.update_layout(
        barmode="group",
        margin=dict(l=0, r=0, t=20, b=0),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1.0),
        xaxis=dict(showgrid=False),
        yaxis=dict(showgrid=True, gridcolor=TOKENS.neutral_background, zeroline=False),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig
