"""Transaction history page: filters, table, export and print."""

from __future__ import annotations

from datetime import date
from typing import Sequence

import streamlit as st

from analytics import filter_transactions, has_active_filters
from app.layout import card, trigger_print
from config.categories import available_categories, type_label
from core import Transaction, TransactionStore
from core.export import build_csv_export, build_print_report, export_filename, render_print_html
from core.formatting import format_currency, format_medium_date

_FILTER_KEYS = ("filter_category", "filter_start", "filter_end")


def _clear_filters() -> None:
    for key in _FILTER_KEYS:
        st.session_state[key] = None


def _iso(value: date | None) -> str | None:
    return value.isoformat() if value else None


def _render_filters() -> tuple[str | None, str | None, str | None]:
    with card("Filter Transaksi"):
        cols = st.columns((2, 1, 1))
        category = cols[0].selectbox(
            "Kategori",
            options=available_categories(),
            index=None,
            placeholder="Semua Kategori",
            key="filter_category",
        )
        start = cols[1].date_input("Dari Tanggal", value=None, key="filter_start")
        end = cols[2].date_input("Sampai Tanggal", value=None, key="filter_end")
        if has_active_filters(category, _iso(start), _iso(end)):
            st.button("Reset Filter", on_click=_clear_filters)
    return category, _iso(start), _iso(end)


def _render_table(store: TransactionStore, rows: Sequence[Transaction]) -> None:
    header = st.columns((1.4, 3, 1.6, 1.8, 0.8))
    for col, label in zip(header, ("Tanggal", "Keterangan", "Kategori", "Jumlah", "")):
        col.markdown(f"**{label}**")

    for t in rows:
        cols = st.columns((1.4, 3, 1.6, 1.8, 0.8))
        cols[0].write(format_medium_date(t.date))
        cols[1].write(t.description)
        cols[2].write(f"{t.category} · {type_label(t.type)}")
        css = "ul-amount--income" if t.is_income else "ul-amount--expense"
        sign = "+" if t.is_income else "-"
        cols[3].markdown(
            f"<span class='{css}'>{sign} {format_currency(t.amount)}</span>",
            unsafe_allow_html=True,
        )
        if cols[4].button("Hapus", key=f"delete-{t.id}", help="Hapus Transaksi"):
            store.delete(t.id)
            st.rerun()


def render_page(store: TransactionStore) -> None:
    """Render the transaction history page."""

    transactions = store.transactions
    if not transactions:
        st.info("Belum ada transaksi. Tambahkan transaksi baru melalui panel samping.")
        return

    category, start, end = _render_filters()
    filtered = filter_transactions(transactions, category=category, start_date=start, end_date=end)

    report = build_print_report(filtered, start_date=start, end_date=end)
    action_cols = st.columns((1, 1, 1, 3))
    action_cols[0].download_button(
        "Export Excel",
        data=build_csv_export(filtered).encode("utf-8"),
        file_name=export_filename(),
        mime="text/csv",
        disabled=not filtered,
    )
    action_cols[1].download_button(
        "Unduh Laporan",
        data=render_print_html(report).encode("utf-8"),
        file_name=export_filename().replace(".csv", ".html"),
        mime="text/html",
        disabled=not filtered,
    )
    if action_cols[2].button("Cetak / PDF", disabled=not filtered):
        trigger_print()

    st.caption(report.subtitle)

    if not filtered:
        st.info("Tidak ada transaksi yang cocok dengan filter.")
        return

    _render_table(store, filtered)

    st.divider()
    for label, value in report.summary_rows:
        cols = st.columns((4, 2))
        cols[0].markdown(f"**{label}**")
        cols[1].markdown(f"**{value}**")


__all__ = ["render_page"]
