"""
Key-value stores holding JSON documents under fixed string keys.

Values are read and written wholesale; there is no locking or optimistic
concurrency, one writer per namespace is assumed.
"""
import json
import logging
from typing import Any, Dict
from sqlalchemy.orm import Session
from moodcheck.models.kv_entry import KeyValueEntry

logger = logging.getLogger(__name__)


def _loads(raw: str, key: str, default: Any) -> Any:
    try:
        return json.loads(raw)
    except (TypeError, ValueError):
        logger.warning(f"Discarding unreadable value stored under '{key}'")
        return default


class KeyValueStore:
    """Interface shared by the storage backends."""

    def get(self, key: str, default: Any = None) -> Any:
        raise NotImplementedError

    def set(self, key: str, value: Any) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError


class SqlKeyValueStore(KeyValueStore):
    """Documents persisted as rows of the kv_entries table. Every write commits."""

    def __init__(self, db: Session):
        self.db = db

    def _entry(self, key: str):
        return self.db.query(KeyValueEntry).filter(KeyValueEntry.key == key).first()

    def get(self, key: str, default: Any = None) -> Any:
        entry = self._entry(key)
        if entry is None:
            return default
        return _loads(entry.value, key, default)

    def set(self, key: str, value: Any) -> None:
        raw = json.dumps(value)
        entry = self._entry(key)
        if entry is None:
            self.db.add(KeyValueEntry(key=key, value=raw))
        else:
            entry.value = raw
        self.db.commit()

    def remove(self, key: str) -> None:
        entry = self._entry(key)
        if entry is not None:
            self.db.delete(entry)
            self.db.commit()


class MemoryKeyValueStore(KeyValueStore):
    """Process-local demo store; values are kept serialized like browser storage."""

    def __init__(self):
        self._data: Dict[str, str] = {}

    def get(self, key: str, default: Any = None) -> Any:
        raw = self._data.get(key)
        if raw is None:
            return default
        return _loads(raw, key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = json.dumps(value)

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def clear(self) -> None:
        self._data.clear()
