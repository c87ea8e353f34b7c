"""
Sliding-window attempt limiter persisted in the key-value store.
"""
import time
from typing import List, Optional
from moodcheck.storage.kv_store import KeyValueStore

RATE_LIMIT_PREFIX = "rateLimit:"


class RateLimitStatus:
    """Snapshot of one limiter key; ``add_attempt`` records a new attempt."""

    def __init__(self, store: KeyValueStore, storage_key: str, attempts: List[float],
                 max_attempts: int, window_seconds: float, now: float):
        self._store = store
        self._storage_key = storage_key
        self._attempts = attempts
        self._now = now
        self.is_allowed = len(attempts) < max_attempts
        self.remaining_attempts = max(0, max_attempts - len(attempts))
        self.reset_time = min(attempts) + window_seconds if attempts else now

    def add_attempt(self) -> None:
        self._attempts.append(self._now)
        self._store.set(self._storage_key, self._attempts)


def check_rate_limit(
    store: KeyValueStore,
    key: str,
    max_attempts: int = 5,
    window_seconds: float = 15 * 60,
    now: Optional[float] = None
) -> RateLimitStatus:
    """
    Report whether another attempt under ``key`` is allowed.

    Attempts older than the window are dropped. ``reset_time`` is the epoch
    second at which the oldest counted attempt expires.
    """
    if now is None:
        now = time.time()
    storage_key = f"{RATE_LIMIT_PREFIX}{key}"

    stored = store.get(storage_key, [])
    if not isinstance(stored, list):
        stored = []
    attempts = [
        ts for ts in stored
        if isinstance(ts, (int, float)) and now - ts < window_seconds
    ]

    return RateLimitStatus(store, storage_key, attempts, max_attempts, window_seconds, now)


def reset_rate_limit(store: KeyValueStore, key: str) -> None:
    """Forget every attempt recorded under ``key``."""
    store.remove(f"{RATE_LIMIT_PREFIX}{key}")
