"""
Tests for the sliding-window rate limiter.
"""
from moodcheck.core.rate_limit import check_rate_limit, reset_rate_limit


def test_attempts_are_counted(store):
    for i in range(3):
        status = check_rate_limit(store, "login:a", max_attempts=3, window_seconds=60, now=1000 + i)
        assert status.is_allowed
        status.add_attempt()

    blocked = check_rate_limit(store, "login:a", max_attempts=3, window_seconds=60, now=1010)
    assert not blocked.is_allowed
    assert blocked.remaining_attempts == 0
    assert blocked.reset_time == 1060


def test_old_attempts_expire(store):
    check_rate_limit(store, "login:b", max_attempts=1, window_seconds=60, now=1000).add_attempt()
    assert not check_rate_limit(store, "login:b", max_attempts=1, window_seconds=60, now=1030).is_allowed
    assert check_rate_limit(store, "login:b", max_attempts=1, window_seconds=60, now=1061).is_allowed


def test_reset(store):
    check_rate_limit(store, "login:c", max_attempts=1, now=1000).add_attempt()
    reset_rate_limit(store, "login:c")
    assert check_rate_limit(store, "login:c", max_attempts=1, now=1001).remaining_attempts == 1
