"""
Reflection journal routes.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
from moodcheck.schemas.reflection import ReflectionCreate, ReflectionResponse
from moodcheck.services import history_service
from moodcheck.services.auth_service import AuthSession, ROLE_ADMIN
from moodcheck.core.validation import sanitize_text_input
from moodcheck.storage.kv_store import KeyValueStore
from moodcheck.api.dependencies import get_current_session, get_store, require_roles

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reflections", tags=["reflections"])


@router.post("", response_model=ReflectionResponse, status_code=status.HTTP_201_CREATED)
async def submit_reflection(
    entry_data: ReflectionCreate,
    session: AuthSession = Depends(get_current_session),
    store: KeyValueStore = Depends(get_store)
):
    """Submit a mood reflection for the signed-in user."""
    return history_service.add_entry(
        store,
        email=session.email,
        mood=entry_data.mood,
        sleep_hours=entry_data.sleep_hours,
        text=sanitize_text_input(entry_data.text),
        age=entry_data.age
    )


@router.get("/mine", response_model=List[ReflectionResponse])
async def list_my_reflections(
    session: AuthSession = Depends(get_current_session),
    store: KeyValueStore = Depends(get_store)
):
    """Get the user's own history, without entries they have hidden."""
    return history_service.load_user_history_filtered(store, session.email)


@router.post("/{entry_id}/hide", status_code=status.HTTP_204_NO_CONTENT)
async def hide_reflection(
    entry_id: str,
    session: AuthSession = Depends(get_current_session),
    store: KeyValueStore = Depends(get_store)
):
    """Hide one of the user's entries from their history. Statistics keep it."""
    owned_ids = {entry["id"] for entry in history_service.load_user_history(store, session.email)}
    if entry_id not in owned_ids:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Entry not found"
        )
    history_service.hide_entry_for_user(store, entry_id, session.email)


@router.get("", response_model=List[ReflectionResponse])
async def list_all_reflections(
    session: AuthSession = Depends(require_roles(ROLE_ADMIN)),
    store: KeyValueStore = Depends(get_store)
):
    """Get every reflection entry, newest first."""
    return history_service.load_history(store)


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_reflection(
    entry_id: str,
    session: AuthSession = Depends(require_roles(ROLE_ADMIN)),
    store: KeyValueStore = Depends(get_store)
):
    """Permanently remove an entry for everyone."""
    history_service.remove_entry(store, entry_id)
    logger.info(f"{session.email} removed reflection {entry_id}")


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def clear_reflections(
    session: AuthSession = Depends(require_roles(ROLE_ADMIN)),
    store: KeyValueStore = Depends(get_store)
):
    """Delete the whole reflection history."""
    history_service.clear_history(store)
