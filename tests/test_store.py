"""Tests for the transaction store and its storage backends."""

from __future__ import annotations

import json

import pytest

from analytics.aggregation import compute_summary
from config.categories import INITIAL_TRANSACTIONS
from core.store import STORAGE_KEY, JsonFileStorage, MemoryStorage, StoreLoadError, TransactionStore


def test_empty_storage_falls_back_to_seed():
    store = TransactionStore(MemoryStorage())

    assert len(store) == len(INITIAL_TRANSACTIONS)
    assert [t.id for t in store] == ["1", "2", "3", "4", "5", "6"]


def test_stored_empty_list_is_respected():
    store = TransactionStore(MemoryStorage({STORAGE_KEY: "[]"}))

    assert store.transactions == ()


def test_add_appends_and_persists(make_txn):
    storage = MemoryStorage()
    store = TransactionStore(storage, seed=[])
    first = make_txn("x1", "2023-11-01", 100)
    second = make_txn("x2", "2023-10-01", 200, "expense", "Operasional")

    store.add(first)
    store.add(second)

    assert store.transactions == (first, second)
    persisted = json.loads(storage.get_item(STORAGE_KEY))
    assert [item["id"] for item in persisted] == ["x1", "x2"]
    assert persisted[1] == {
        "id": "x2",
        "date": "2023-10-01",
        "description": "Transaksi x2",
        "amount": 200,
        "type": "expense",
        "category": "Operasional",
    }


def test_delete_removes_exactly_one_record():
    storage = MemoryStorage()
    store = TransactionStore(storage)
    before = {t.id: t for t in store}

    assert store.delete("3") is True

    assert store.get("3") is None
    assert len(store) == len(before) - 1
    for transaction in store:
        assert transaction == before[transaction.id]
    assert "\"3\"" not in storage.get_item(STORAGE_KEY)


def test_delete_unknown_id_is_noop():
    storage = MemoryStorage()
    store = TransactionStore(storage)
    before = store.transactions

    assert store.delete("missing") is False
    assert store.transactions == before
    assert storage.get_item(STORAGE_KEY) is None


def test_round_trip_through_file_keeps_summary(tmp_path, make_txn):
    path = tmp_path / "ledger.json"
    store = TransactionStore(JsonFileStorage(path))
    store.add(make_txn("new", "2023-10-20", 125000.5, "income", "Tenun"))
    summary_before = compute_summary(store.transactions)

    reloaded = TransactionStore(JsonFileStorage(path))

    assert reloaded.transactions == store.transactions
    assert compute_summary(reloaded.transactions) == summary_before


def test_json_file_storage_keeps_other_keys(tmp_path):
    path = tmp_path / "nested" / "ledger.json"
    storage = JsonFileStorage(path)

    storage.set_item("other", "value")
    storage.set_item(STORAGE_KEY, "[]")

    assert json.loads(path.read_text(encoding="utf-8")) == {"other": "value", STORAGE_KEY: "[]"}
    assert storage.get_item("missing") is None


@pytest.mark.parametrize("blob", ["{not json", "{\"id\": \"1\"}", "[1, 2]"])
def test_corrupt_blob_raises_store_load_error(blob):
    with pytest.raises(StoreLoadError):
        TransactionStore(MemoryStorage({STORAGE_KEY: blob}))


def test_corrupt_file_raises_store_load_error(tmp_path):
    path = tmp_path / "ledger.json"
    path.write_text("not json at all", encoding="utf-8")

    with pytest.raises(StoreLoadError):
        TransactionStore(JsonFileStorage(path))
