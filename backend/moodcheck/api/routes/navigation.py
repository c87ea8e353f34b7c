"""
Navigation routes exposing the client route table and its guard.
"""
from fastapi import APIRouter, Depends, Query
from typing import List, Optional
from moodcheck.schemas.navigation import NavigationResponse, RouteResponse
from moodcheck.services.auth_service import AuthSession
from moodcheck.services.navigation_service import ROUTES, resolve_navigation
from moodcheck.api.dependencies import get_optional_session

router = APIRouter(prefix="/navigation", tags=["navigation"])


@router.get("/routes", response_model=List[RouteResponse])
async def list_routes():
    """Get the static route table."""
    return ROUTES


@router.get("/resolve", response_model=NavigationResponse)
async def resolve(
    path: str = Query(..., min_length=1),
    session: Optional[AuthSession] = Depends(get_optional_session)
):
    """Check whether the caller may open ``path``, and where to go if not."""
    return resolve_navigation(path, session)
