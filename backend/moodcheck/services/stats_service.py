"""
Anonymized statistics over reflection entries.
"""
from typing import Any, Dict, Iterable, List

MOOD_BUCKETS = (1, 2, 3, 4, 5)
AGE_GROUPS = (
    ("12-16", 12, 16),
    ("17-21", 17, 21),
    ("22-25", 22, 25),
)


def _as_number(value: Any) -> float:
    """Coerce a stored field to a number; missing or unparseable counts as 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def compute_anonymized_stats(entries: Iterable[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Aggregate reflection entries for the admin dashboard.

    Only counts and averages are returned, never an owner email or entry id.
    Moods outside 1-5 (or non-integral) and ages outside the three groups
    still count towards the totals and averages but not the histograms.
    """
    entries: List[Dict[str, Any]] = list(entries)
    total = len(entries)

    stats = {
        "total_submissions": total,
        "average_mood": 0.0,
        "average_sleep": 0.0,
        "mood_distribution": {mood: 0 for mood in MOOD_BUCKETS},
        "age_groups": {label: 0 for label, _, _ in AGE_GROUPS},
    }
    if total == 0:
        return stats

    stats["average_mood"] = sum(_as_number(e.get("mood")) for e in entries) / total
    stats["average_sleep"] = sum(_as_number(e.get("sleep_hours")) for e in entries) / total

    for entry in entries:
        mood = _as_number(entry.get("mood"))
        if mood.is_integer() and int(mood) in stats["mood_distribution"]:
            stats["mood_distribution"][int(mood)] += 1

        age = _as_number(entry.get("age"))
        for label, low, high in AGE_GROUPS:
            if low <= age <= high:
                stats["age_groups"][label] += 1
                break

    return stats
