from __future__ import annotations

from analytics.filtering import filter_transactions, has_active_filters
from config.categories import available_categories


def test_no_filters_returns_everything_newest_first(sample_transactions):
    result = filter_transactions(sample_transactions)

    assert [t.id for t in result] == ["6", "5", "4", "3", "2", "1"]
    # input list is left untouched
    assert [t.id for t in sample_transactions] == ["1", "2", "3", "4", "5", "6"]


def test_category_filter_is_exact_match(sample_transactions):
    result = filter_transactions(sample_transactions, category="Menjahit")

    assert [t.id for t in result] == ["5", "4"]
    assert filter_transactions(sample_transactions, category="menjahit") == []


def test_date_bounds_are_inclusive(sample_transactions):
    result = filter_transactions(sample_transactions, start_date="2023-10-05", end_date="2023-10-15")

    assert [t.date for t in result] == ["2023-10-15", "2023-10-10", "2023-10-05"]


def test_single_day_range_returns_only_that_day(make_txn):
    transactions = [
        make_txn("a", "2023-10-01", 10),
        make_txn("b", "2023-10-02", 20),
        make_txn("c", "2023-10-02", 30),
        make_txn("d", "2023-10-03", 40),
    ]

    result = filter_transactions(transactions, start_date="2023-10-02", end_date="2023-10-02")

    assert {t.id for t in result} == {"b", "c"}
    assert all(t.date == "2023-10-02" for t in result)


def test_empty_filters_are_ignored(sample_transactions):
    assert len(filter_transactions(sample_transactions, category="", start_date="", end_date=None)) == 6
    assert has_active_filters() is False
    assert has_active_filters(category="", start_date=None, end_date="2023-10-01") is True


def test_available_categories_is_sorted_union():
    categories = available_categories()

    assert categories == sorted(categories)
    assert "Operasional" in categories
    assert len(categories) == len(set(categories))
