from __future__ import annotations

import math
from datetime import date

import pytest

from core.formatting import format_amount, format_currency, format_short_date
from core.models import Transaction, create_transaction


def _valid_form(**overrides):
    form = {
        "type": "income",
        "amount": "2500000",
        "category": "Menjahit",
        "date": date(2023, 10, 15),
        "description": "Borongan Jahit Seragam",
        "id_factory": lambda: "fixed-id",
    }
    form.update(overrides)
    return form


def test_create_transaction_builds_record():
    transaction = create_transaction(**_valid_form())

    assert transaction == Transaction(
        id="fixed-id",
        date="2023-10-15",
        description="Borongan Jahit Seragam",
        amount=2500000.0,
        type="income",
        category="Menjahit",
    )


def test_create_transaction_assigns_unique_ids():
    form = _valid_form()
    form.pop("id_factory")

    first = create_transaction(**form)
    second = create_transaction(**form)

    assert first is not None and second is not None
    assert first.id != second.id


@pytest.mark.parametrize(
    "overrides",
    [
        {"amount": ""},
        {"amount": None},
        {"amount": "0"},
        {"amount": -5},
        {"amount": "abc"},
        {"amount": float("nan")},
        {"category": ""},
        {"category": None},
        {"type": "transfer"},
        {"type": "income", "category": "Operasional"},
        {"date": None},
        {"date": "15/10/2023"},
        {"description": "   "},
    ],
)
def test_create_transaction_rejects_invalid_input(overrides):
    assert create_transaction(**_valid_form(**overrides)) is None


def test_operasional_is_allowed_for_expense_only():
    assert create_transaction(**_valid_form(type="expense", category="Operasional")) is not None


def test_from_dict_coerces_bad_amount_to_nan():
    transaction = Transaction.from_dict(
        {"id": "1", "date": "2023-10-01", "description": "x", "amount": "abc", "type": "income", "category": "Las"}
    )

    assert math.isnan(transaction.amount)


@pytest.mark.parametrize(
    ("value", "expected"),
    [(3500000, "3.500.000"), (1234.5, "1.234,5"), (0, "0"), (-450000, "-450.000")],
)
def test_format_amount_uses_indonesian_grouping(value, expected):
    assert format_amount(value) == expected


def test_currency_and_date_labels():
    assert format_currency(150000) == "Rp 150.000"
    assert format_short_date("2023-10-01") == "01 Okt"
    assert format_short_date("not-a-date") == "not-a-date"
