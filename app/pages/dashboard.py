"""Dashboard page layout."""

from __future__ import annotations

import streamlit as st

from app.layout import card
from core import DashboardData, FinancialSummary, UnitPerformance
from core.formatting import format_currency
from visualization import build_category_chart, build_trend_chart, build_unit_chart

UNITS_PER_ROW = 4


def _render_summary_cards(summary: FinancialSummary) -> None:
    cols = st.columns(3, gap="medium")
    with cols[0]:
        with card("Total Pemasukan"):
            st.markdown(
                f"<span class='ul-amount--income'>{format_currency(summary['total_income'])}</span>",
                unsafe_allow_html=True,
            )
    with cols[1]:
        with card("Total Pengeluaran"):
            st.markdown(
                f"<span class='ul-amount--expense'>{format_currency(summary['total_expense'])}</span>",
                unsafe_allow_html=True,
            )
    with cols[2]:
        with card("Saldo Akhir"):
            css = "ul-amount--income" if summary["balance"] >= 0 else "ul-amount--expense"
            st.markdown(
                f"<span class='{css}'>{format_currency(summary['balance'])}</span>",
                unsafe_allow_html=True,
            )


def _render_unit(unit: UnitPerformance) -> None:
    with card(unit["name"], suffix="Aktif" if unit["has_data"] else None):
        st.plotly_chart(build_unit_chart(unit), use_container_width=True, key=f"unit-{unit['name']}")
        if unit["has_data"]:
            st.caption(f"Pemasukan: {format_currency(unit['income'])}")
            st.caption(f"Pengeluaran: {format_currency(unit['expense'])}")
            label = "Laba" if unit["profit"] >= 0 else "Rugi"
            st.markdown(f"**{label}: {format_currency(abs(unit['profit']))}**")


def _render_unit_performance(units: list[UnitPerformance]) -> None:
    st.subheader("Performa Unit Usaha (Pemasukan vs Pengeluaran)")
    for start in range(0, len(units), UNITS_PER_ROW):
        cols = st.columns(UNITS_PER_ROW, gap="small")
        for col, unit in zip(cols, units[start : start + UNITS_PER_ROW]):
            with col:
                _render_unit(unit)


def render_page(data: DashboardData) -> None:
    """Render the dashboard page."""

    _render_summary_cards(data["summary"])
    _render_unit_performance(data["unit_performance"])

    left, right = st.columns(2, gap="medium")
    with left:
        with card("Sumber Pemasukan", suffix="Per kategori"):
            st.plotly_chart(
                build_category_chart(data["income_by_category"], kind="income"),
                use_container_width=True,
                key="income-donut",
            )
    with right:
        with card("Alokasi Pengeluaran", suffix="Per kategori"):
            st.plotly_chart(
                build_category_chart(data["expense_by_category"], kind="expense"),
                use_container_width=True,
                key="expense-donut",
            )

    with card("Tren Arus Kas", suffix="7 tanggal terakhir"):
        st.plotly_chart(build_trend_chart(data["daily_trend"]), use_container_width=True, key="trend-bars")


__all__ = ["render_page"]
