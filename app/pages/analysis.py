"""AI analysis page."""

from __future__ import annotations

from typing import Sequence

import streamlit as st

from app.layout import card
from core import Transaction, analyze_financial_data

BUSY_KEY = "analysis_busy"
RESULT_KEY = "analysis_result"


def _start_analysis() -> None:
    st.session_state[BUSY_KEY] = True


def render_page(transactions: Sequence[Transaction]) -> None:
    """Render the AI analysis page."""

    with card("Analisis Keuangan Cerdas", suffix="AI"):
        st.write(
            "Gunakan kecerdasan buatan untuk menganalisis pola keuangan unit usaha Anda "
            "dan dapatkan saran yang dipersonalisasi."
        )
        busy = bool(st.session_state.get(BUSY_KEY))
        st.button(
            "Sedang Menganalisis..." if busy else "Mulai Analisis AI",
            type="primary",
            disabled=busy,
            on_click=_start_analysis,
        )

    if st.session_state.get(BUSY_KEY):
        with st.spinner("Sedang Menganalisis..."):
            try:
                st.session_state[RESULT_KEY] = analyze_financial_data(transactions)
            finally:
                st.session_state[BUSY_KEY] = False
        st.rerun()

    result = st.session_state.get(RESULT_KEY)
    if result:
        with card("Hasil Analisis", suffix="Markdown"):
            st.markdown(result)


__all__ = ["render_page"]
