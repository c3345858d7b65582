"""Shared fixtures for UnitLedger tests."""

from __future__ import annotations

import pytest
import streamlit as st

from core.models import Transaction


@pytest.fixture(autouse=True)
def clear_streamlit_secrets(monkeypatch):
    """Provide an empty secrets mapping so tests don't rely on Streamlit runtime."""

    monkeypatch.setattr(st, "secrets", {}, raising=False)


def make_transaction(
    txn_id: str,
    date: str,
    amount: float,
    kind: str = "income",
    category: str = "Las",
    description: str | None = None,
) -> Transaction:
    return Transaction(
        id=txn_id,
        date=date,
        description=description or f"Transaksi {txn_id}",
        amount=amount,
        type=kind,
        category=category,
    )


@pytest.fixture()
def sample_transactions() -> list[Transaction]:
    return [
        make_transaction("1", "2023-10-01", 3500000, "income", "Las", "Jasa Las Pagar Besi"),
        make_transaction("2", "2023-10-02", 450000, "expense", "Doorsmeer", "Belanja Sabun & Wax Doorsmeer"),
        make_transaction("3", "2023-10-05", 350000, "income", "Pangkas", "Pendapatan Harian Pangkas"),
        make_transaction("4", "2023-10-10", 150000, "expense", "Menjahit", "Service Mesin Jahit"),
        make_transaction("5", "2023-10-15", 2500000, "income", "Menjahit", "Borongan Jahit Seragam"),
        make_transaction("6", "2023-10-18", 500000, "expense", "Operasional", "Bayar Listrik Workshop"),
    ]


@pytest.fixture()
def make_txn():
    """Factory fixture building transactions with sensible defaults."""

    return make_transaction
