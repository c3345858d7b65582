"""Runs the analysis page headlessly with the AI call stubbed out."""

from __future__ import annotations

from streamlit.testing.v1 import AppTest

import app.pages.analysis as analysis_page

ANALYSIS_TEXT = "## Ringkasan\n- Unit Las paling untung"


def _analysis_script() -> None:
    from app.pages.analysis import render_page
    from core.models import Transaction

    render_page(
        [
            Transaction(
                id="1",
                date="2023-10-01",
                description="Jasa Las Pagar Besi",
                amount=3500000.0,
                type="income",
                category="Las",
            )
        ]
    )


def test_analysis_button_stores_result_and_clears_busy_flag(monkeypatch):
    calls: list[int] = []

    def fake_analyze(transactions):
        calls.append(len(transactions))
        return ANALYSIS_TEXT

    monkeypatch.setattr(analysis_page, "analyze_financial_data", fake_analyze)

    at = AppTest.from_function(_analysis_script, default_timeout=30)
    at.run()

    assert not at.exception
    assert at.button[0].label == "Mulai Analisis AI"
    assert calls == []

    at.button[0].click().run()

    assert not at.exception
    assert calls == [1]
    assert at.session_state[analysis_page.BUSY_KEY] is False
    assert at.session_state[analysis_page.RESULT_KEY] == ANALYSIS_TEXT
    assert any(block.value == ANALYSIS_TEXT for block in at.markdown)


def test_failed_analysis_still_clears_busy_flag(monkeypatch):
    def broken_analyze(transactions):
        raise RuntimeError("boom")

    monkeypatch.setattr(analysis_page, "analyze_financial_data", broken_analyze)

    at = AppTest.from_function(_analysis_script, default_timeout=30)
    at.run()
    at.button[0].click().run()

    assert at.exception
    assert at.session_state[analysis_page.BUSY_KEY] is False
    assert analysis_page.RESULT_KEY not in at.session_state
