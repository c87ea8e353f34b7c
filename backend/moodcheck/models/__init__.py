"""Models package - Import all models for SQLAlchemy registration."""
from moodcheck.models.kv_entry import KeyValueEntry

__all__ = [
    "KeyValueEntry",
]
