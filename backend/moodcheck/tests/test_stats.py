"""
Tests for anonymized statistics.
"""
from moodcheck.services.stats_service import compute_anonymized_stats


def test_empty_history():
    stats = compute_anonymized_stats([])
    assert stats["total_submissions"] == 0
    assert stats["average_mood"] == 0
    assert stats["average_sleep"] == 0
    assert stats["mood_distribution"] == {1: 0, 2: 0, 3: 0, 4: 0, 5: 0}
    assert stats["age_groups"] == {"12-16": 0, "17-21": 0, "22-25": 0}


def test_averages_and_histograms():
    entries = [
        {"email": "a@example.com", "mood": 5, "sleep_hours": 8, "age": 14},
        {"email": "b@example.com", "mood": 3, "sleep_hours": 6, "age": 21},
        {"email": "c@example.com", "mood": 1, "sleep_hours": 7, "age": 30},
    ]
    stats = compute_anonymized_stats(entries)
    assert stats["total_submissions"] == 3
    assert stats["average_mood"] == 3
    assert stats["average_sleep"] == 7
    assert stats["mood_distribution"] == {1: 1, 2: 0, 3: 1, 4: 0, 5: 1}
    assert stats["age_groups"] == {"12-16": 1, "17-21": 1, "22-25": 0}
    assert "a@example.com" not in str(stats)


def test_missing_values_count_as_zero():
    stats = compute_anonymized_stats([{"mood": 4}, {"sleep_hours": "6"}])
    assert stats["average_mood"] == 2
    assert stats["average_sleep"] == 3
    assert stats["mood_distribution"][4] == 1
