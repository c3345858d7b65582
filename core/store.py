"""Transaction store with pluggable key-value persistence."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Iterable, Iterator, Mapping, Protocol

from config.categories import INITIAL_TRANSACTIONS
from core.logging_setup import get_logger
from core.models import Transaction

__all__ = [
    "STORAGE_KEY",
    "JsonFileStorage",
    "KeyValueStorage",
    "MemoryStorage",
    "StoreLoadError",
    "TransactionStore",
]

STORAGE_KEY = "transactions"

logger = get_logger("unitledger.store")


class StoreLoadError(ValueError):
    """Raised when the persisted transaction blob cannot be decoded."""


class KeyValueStorage(Protocol):
    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...


class MemoryStorage:
    """In-process storage, mainly for tests and throwaway sessions."""

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value


class JsonFileStorage:
    """Key-value storage backed by a single JSON object on disk.

    Every write replaces the whole file through a temporary sibling so a
    crash mid-write never leaves a truncated ledger behind.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _read_all(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        text = self.path.read_text(encoding="utf-8")
        if not text.strip():
            return {}
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise StoreLoadError(f"Ledger file is not valid JSON: {self.path}") from exc
        if not isinstance(data, dict):
            raise StoreLoadError(f"Ledger file must hold a JSON object: {self.path}")
        return {str(key): str(value) for key, value in data.items()}

    def get_item(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._read_all()
        items[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", dir=self.path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(items, handle, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise


def _decode(raw: str) -> list[Transaction]:
    try:
        payload: Any = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise StoreLoadError("Stored transactions are not valid JSON") from exc
    if not isinstance(payload, list):
        raise StoreLoadError("Stored transactions must be a JSON array")
    if not all(isinstance(item, Mapping) for item in payload):
        raise StoreLoadError("Every stored transaction must be a JSON object")
    return [Transaction.from_dict(item) for item in payload]


class TransactionStore:
    """Ordered, persisted list of transactions.

    The list is loaded once on construction (falling back to ``seed`` when the
    storage holds nothing) and written back in full after every mutation.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        seed: Iterable[Mapping[str, Any]] = INITIAL_TRANSACTIONS,
        key: str = STORAGE_KEY,
    ) -> None:
        self._storage = storage
        self._key = key
        raw = storage.get_item(key)
        if raw:
            self._transactions = _decode(raw)
            logger.info("Loaded %d transactions from storage", len(self._transactions))
        else:
            self._transactions = [Transaction.from_dict(item) for item in seed]
            logger.info("No stored transactions found; seeded %d records", len(self._transactions))

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        return tuple(self._transactions)

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(tuple(self._transactions))

    def get(self, transaction_id: str) -> Transaction | None:
        for transaction in self._transactions:
            if transaction.id == transaction_id:
                return transaction
        return None

    def add(self, transaction: Transaction) -> None:
        self._transactions.append(transaction)
        self.save()
        logger.info("Added transaction %s (%s, %s)", transaction.id, transaction.type, transaction.category)

    def delete(self, transaction_id: str) -> bool:
        """Remove the transaction with ``transaction_id``; unknown ids are a no-op."""

        remaining = [t for t in self._transactions if t.id != transaction_id]
        if len(remaining) == len(self._transactions):
            logger.debug("Delete ignored, unknown transaction id %s", transaction_id)
            return False
        self._transactions = remaining
        self.save()
        logger.info("Deleted transaction %s", transaction_id)
        return True

    def save(self) -> None:
        payload = json.dumps([t.to_dict() for t in self._transactions], ensure_ascii=False)
        self._storage.set_item(self._key, payload)
        logger.debug("Persisted %d transactions", len(self._transactions))
