"""
Review service: ratings with short comments, newest first.
"""
import logging
import math
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from moodcheck.core.config import settings
from moodcheck.core.errors import InvalidInputError
from moodcheck.storage.kv_store import KeyValueStore
from moodcheck.services.history_service import make_id

logger = logging.getLogger(__name__)

REVIEWS_KEY = "reviews_v1"
MIN_RATING = 1
MAX_RATING = 5
ANONYMOUS_AUTHOR = "anonymous"


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _normalize_rating(rating: Any) -> int:
    try:
        value = float(rating)
    except (TypeError, ValueError):
        raise InvalidInputError("Rating must be a number")
    if not math.isfinite(value):
        raise InvalidInputError("Rating must be a finite number")
    return int(clamp(round(value), MIN_RATING, MAX_RATING))


def _normalize_comment(comment: Any) -> str:
    return str(comment or "")[:settings.REVIEW_COMMENT_MAX_LENGTH]


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def load_reviews(store: KeyValueStore) -> List[Dict[str, Any]]:
    reviews = store.get(REVIEWS_KEY, [])
    return reviews if isinstance(reviews, list) else []


def save_reviews(store: KeyValueStore, reviews: List[Dict[str, Any]]) -> None:
    store.set(REVIEWS_KEY, reviews)


def get_review(store: KeyValueStore, review_id: str) -> Optional[Dict[str, Any]]:
    for review in load_reviews(store):
        if review.get("id") == review_id:
            return review
    return None


def add_review(
    store: KeyValueStore,
    rating: Any,
    comment: Any = "",
    user: Optional[str] = None,
    ts: Optional[str] = None
) -> Dict[str, Any]:
    """Prepend a review; rating is clamped to 1-5 and comment truncated."""
    review = {
        "id": make_id(),
        "rating": _normalize_rating(rating),
        "comment": _normalize_comment(comment),
        "user": user or ANONYMOUS_AUTHOR,
        "ts": ts or _now(),
        "ts_updated": None,
    }
    reviews = load_reviews(store)
    reviews.insert(0, review)
    save_reviews(store, reviews)
    return review


def update_review(
    store: KeyValueStore,
    review_id: str,
    rating: Any = None,
    comment: Any = None
) -> List[Dict[str, Any]]:
    """
    Patch a review in place. Fields left as None are unchanged.
    An unknown id leaves the list untouched.
    """
    reviews = load_reviews(store)
    for review in reviews:
        if review.get("id") != review_id:
            continue
        if rating is not None:
            review["rating"] = _normalize_rating(rating)
        if comment is not None:
            review["comment"] = _normalize_comment(comment)
        review["ts_updated"] = _now()
        save_reviews(store, reviews)
        break
    return reviews


def delete_review(store: KeyValueStore, review_id: str) -> List[Dict[str, Any]]:
    reviews = [review for review in load_reviews(store) if review.get("id") != review_id]
    save_reviews(store, reviews)
    return reviews


def clear_reviews(store: KeyValueStore) -> None:
    store.remove(REVIEWS_KEY)
    logger.info("All reviews cleared")


def reviews_by_user(store: KeyValueStore, email: str) -> List[Dict[str, Any]]:
    return [review for review in load_reviews(store) if review.get("user") == email]
