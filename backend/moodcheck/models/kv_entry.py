"""
Key-value entry model backing the document store.
"""
from sqlalchemy import Column, String, Text
from moodcheck.db.base import BaseModel


class KeyValueEntry(BaseModel):
    """One JSON-serialized value stored under a fixed string key."""
    __tablename__ = "kv_entries"

    key = Column(String(255), unique=True, nullable=False, index=True)
    value = Column(Text, nullable=False)
