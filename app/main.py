"""UnitLedger dashboard entrypoint."""

from __future__ import annotations

import streamlit as st

from app.layout import (
    NAV_LINKS,
    determine_active_page,
    inject_css,
    render_add_transaction_form,
    render_navbar,
    render_page_header,
)
from app.pages import render_analysis_page, render_dashboard_page, render_transactions_page
from config import get_settings
from core import JsonFileStorage, StoreLoadError, TransactionStore
from core.logging_setup import configure_logging, get_logger
from core.summary_service import prepare_dashboard_data

STORE_KEY = "transaction_store"

logger = get_logger("unitledger.app")


def _get_store() -> TransactionStore:
    """Return the session's transaction store, loading it on first use."""

    if STORE_KEY not in st.session_state:
        settings = get_settings()
        st.session_state[STORE_KEY] = TransactionStore(JsonFileStorage(settings.ledger_path))
    return st.session_state[STORE_KEY]


def main() -> None:
    """Application entrypoint for the UnitLedger dashboard."""

    st.set_page_config(
        page_title="Laporan Keuangan Kegiatan Kerja",
        page_icon="💼",
        layout="wide",
    )
    configure_logging(get_settings().log_level)
    inject_css()

    valid_pages = [link.slug for link in NAV_LINKS]
    active_page = determine_active_page(valid_pages)
    render_navbar(active_page)

    try:
        store = _get_store()
    except StoreLoadError as exc:
        logger.error("Could not load ledger: %s", exc)
        st.error(f"Data transaksi tidak dapat dibaca: {exc}")
        st.stop()

    render_add_transaction_form(store)
    render_page_header(active_page)

    if active_page == "transactions":
        render_transactions_page(store)
    elif active_page == "analysis":
        render_analysis_page(store.transactions)
    else:
        render_dashboard_page(prepare_dashboard_data(store.transactions))


if __name__ == "__main__":
    main()
