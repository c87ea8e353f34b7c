"""Key-value persistence backends."""
from moodcheck.storage.kv_store import KeyValueStore, SqlKeyValueStore, MemoryKeyValueStore

__all__ = ["KeyValueStore", "SqlKeyValueStore", "MemoryKeyValueStore"]
