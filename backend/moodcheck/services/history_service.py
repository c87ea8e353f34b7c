"""
Reflection history service.

Entries live in one list under HISTORY_KEY, newest first. A user "deleting"
an entry only hides it from their own view; admin aggregates still see it.
"""
import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from moodcheck.storage.kv_store import KeyValueStore
from moodcheck.services.stats_service import compute_anonymized_stats

logger = logging.getLogger(__name__)

HISTORY_KEY = "reflect_history_v1"
USER_DELETED_KEY = "user_deleted_entries_v1"


def make_id() -> str:
    """Generate a unique entry id."""
    return uuid.uuid4().hex


def load_history(store: KeyValueStore) -> List[Dict[str, Any]]:
    history = store.get(HISTORY_KEY, [])
    return history if isinstance(history, list) else []


def save_history(store: KeyValueStore, entries: List[Dict[str, Any]]) -> None:
    store.set(HISTORY_KEY, entries)


def clear_history(store: KeyValueStore) -> None:
    store.remove(HISTORY_KEY)
    logger.info("Reflection history cleared")


def add_entry(
    store: KeyValueStore,
    email: str,
    mood: int,
    sleep_hours: float,
    text: str = "",
    age: Optional[int] = None,
    entry_id: Optional[str] = None,
    ts: Optional[str] = None
) -> Dict[str, Any]:
    """Prepend a new reflection entry and return it."""
    entry = {
        "id": entry_id or make_id(),
        "email": email,
        "mood": mood,
        "sleep_hours": sleep_hours,
        "text": text,
        "age": age,
        "ts": ts or datetime.now(timezone.utc).isoformat(),
    }
    entries = load_history(store)
    entries.insert(0, entry)
    save_history(store, entries)
    return entry


def load_user_history(store: KeyValueStore, email: str) -> List[Dict[str, Any]]:
    """All entries owned by ``email``, hidden ones included."""
    if not email:
        return []
    return [entry for entry in load_history(store) if entry.get("email") == email]


def remove_entry(store: KeyValueStore, entry_id: str) -> List[Dict[str, Any]]:
    """Hard-delete an entry for everyone and return the remaining list."""
    entries = [entry for entry in load_history(store) if entry.get("id") != entry_id]
    save_history(store, entries)
    return entries


def get_user_deleted_entries(store: KeyValueStore, email: str) -> List[str]:
    deleted = store.get(USER_DELETED_KEY, {})
    if not isinstance(deleted, dict):
        return []
    return list(deleted.get(email, []))


def save_user_deleted_entries(store: KeyValueStore, email: str, deleted_ids: List[str]) -> None:
    deleted = store.get(USER_DELETED_KEY, {})
    if not isinstance(deleted, dict):
        deleted = {}
    deleted[email] = deleted_ids
    store.set(USER_DELETED_KEY, deleted)


def hide_entry_for_user(store: KeyValueStore, entry_id: str, email: str) -> None:
    """Hide an entry from ``email``'s own history. Hiding twice is a no-op."""
    deleted_ids = get_user_deleted_entries(store, email)
    if entry_id not in deleted_ids:
        deleted_ids.append(entry_id)
        save_user_deleted_entries(store, email, deleted_ids)


def load_user_history_filtered(store: KeyValueStore, email: str) -> List[Dict[str, Any]]:
    """Entries owned by ``email`` minus the ones they have hidden."""
    if not email:
        return []
    deleted_ids = set(get_user_deleted_entries(store, email))
    return [entry for entry in load_user_history(store, email) if entry.get("id") not in deleted_ids]


def get_anonymized_stats(store: KeyValueStore) -> Dict[str, Any]:
    """Aggregate statistics over the full history, hidden entries included."""
    return compute_anonymized_stats(load_history(store))
