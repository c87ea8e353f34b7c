"""
Admin statistics routes.
"""
from fastapi import APIRouter, Depends
from moodcheck.schemas.reflection import AnonymizedStats
from moodcheck.services import history_service
from moodcheck.services.auth_service import AuthSession, ROLE_ADMIN
from moodcheck.storage.kv_store import KeyValueStore
from moodcheck.api.dependencies import get_store, require_roles

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("/anonymized", response_model=AnonymizedStats)
async def anonymized_stats(
    session: AuthSession = Depends(require_roles(ROLE_ADMIN)),
    store: KeyValueStore = Depends(get_store)
):
    """Aggregate mood, sleep and age figures over all submissions."""
    return history_service.get_anonymized_stats(store)
