"""
Tests for the review service.
"""
import pytest
from moodcheck.core.errors import InvalidInputError
from moodcheck.services import review_service


def test_rating_is_clamped(store):
    assert review_service.add_review(store, rating=7, comment="great")["rating"] == 5
    assert review_service.add_review(store, rating=-2)["rating"] == 1


def test_comment_is_truncated(store):
    review = review_service.add_review(store, rating=4, comment="x" * 450)
    assert len(review["comment"]) == 300


def test_author_defaults_to_anonymous(store):
    assert review_service.add_review(store, rating=3)["user"] == "anonymous"


def test_update_review(store):
    review = review_service.add_review(store, rating=3, comment="ok", user="a@example.com")
    reviews = review_service.update_review(store, review["id"], rating=9)
    assert reviews[0]["rating"] == 5
    assert reviews[0]["comment"] == "ok"
    assert reviews[0]["ts_updated"] is not None


def test_update_unknown_review_is_noop(store):
    review_service.add_review(store, rating=3)
    before = review_service.load_reviews(store)
    assert review_service.update_review(store, "missing", rating=1) == before


def test_delete_and_filter_by_user(store):
    mine = review_service.add_review(store, rating=5, user="a@example.com")
    review_service.add_review(store, rating=2, user="b@example.com")
    assert [r["id"] for r in review_service.reviews_by_user(store, "a@example.com")] == [mine["id"]]

    review_service.delete_review(store, mine["id"])
    assert review_service.reviews_by_user(store, "a@example.com") == []

    review_service.clear_reviews(store)
    assert review_service.load_reviews(store) == []


def test_non_finite_rating_is_rejected(store):
    with pytest.raises(InvalidInputError):
        review_service.add_review(store, rating=float("nan"))
    with pytest.raises(InvalidInputError):
        review_service.add_review(store, rating="lots")

    review = review_service.add_review(store, rating=3)
    with pytest.raises(InvalidInputError):
        review_service.update_review(store, review["id"], rating=float("inf"))
    assert review_service.get_review(store, review["id"])["rating"] == 3
