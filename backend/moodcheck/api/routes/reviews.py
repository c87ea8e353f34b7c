"""
Review routes: users rate the service, admins manage the ratings.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
from moodcheck.schemas.review import ReviewCreate, ReviewUpdate, ReviewResponse
from moodcheck.services import review_service
from moodcheck.services.auth_service import AuthSession, ROLE_ADMIN, ROLE_USER
from moodcheck.core.validation import sanitize_text_input
from moodcheck.storage.kv_store import KeyValueStore
from moodcheck.api.dependencies import get_store, require_roles

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reviews", tags=["reviews"])


def check_review_access(review_id: str, session: AuthSession, store: KeyValueStore) -> dict:
    """Check the review exists and the session may change it."""
    review = review_service.get_review(store, review_id)
    if not review:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Review not found"
        )
    if session.role != ROLE_ADMIN and review.get("user") != session.email:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access denied to this review"
        )
    return review


@router.post("", response_model=ReviewResponse, status_code=status.HTTP_201_CREATED)
async def create_review(
    review_data: ReviewCreate,
    session: AuthSession = Depends(require_roles(ROLE_USER)),
    store: KeyValueStore = Depends(get_store)
):
    """Add a rating with an optional comment."""
    return review_service.add_review(
        store,
        rating=review_data.rating,
        comment=sanitize_text_input(review_data.comment),
        user=session.email
    )


@router.get("/mine", response_model=List[ReviewResponse])
async def list_my_reviews(
    session: AuthSession = Depends(require_roles(ROLE_USER)),
    store: KeyValueStore = Depends(get_store)
):
    """Get the user's own reviews."""
    return review_service.reviews_by_user(store, session.email)


@router.get("", response_model=List[ReviewResponse])
async def list_reviews(
    session: AuthSession = Depends(require_roles(ROLE_ADMIN)),
    store: KeyValueStore = Depends(get_store)
):
    """Get every review, newest first."""
    return review_service.load_reviews(store)


@router.patch("/{review_id}", response_model=ReviewResponse)
async def update_review(
    review_id: str,
    review_data: ReviewUpdate,
    session: AuthSession = Depends(require_roles(ROLE_USER, ROLE_ADMIN)),
    store: KeyValueStore = Depends(get_store)
):
    """Update rating and/or comment of a review."""
    check_review_access(review_id, session, store)
    comment = review_data.comment
    if comment is not None:
        comment = sanitize_text_input(comment)
    review_service.update_review(store, review_id, rating=review_data.rating, comment=comment)
    return review_service.get_review(store, review_id)


@router.delete("/{review_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_review(
    review_id: str,
    session: AuthSession = Depends(require_roles(ROLE_USER, ROLE_ADMIN)),
    store: KeyValueStore = Depends(get_store)
):
    """Delete a review."""
    check_review_access(review_id, session, store)
    review_service.delete_review(store, review_id)
    logger.info(f"{session.email} deleted review {review_id}")


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def clear_reviews(
    session: AuthSession = Depends(require_roles(ROLE_ADMIN)),
    store: KeyValueStore = Depends(get_store)
):
    """Delete every review."""
    review_service.clear_reviews(store)
