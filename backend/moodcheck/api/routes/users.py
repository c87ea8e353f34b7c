"""
Account routes for the signed-in user.
"""
from fastapi import APIRouter, Depends
from moodcheck.schemas.user import UserResponse, UserUpdate
from moodcheck.services.auth_service import AuthSession, AuthStore, ROLE_USER
from moodcheck.api.dependencies import get_auth_store, get_current_session, require_roles

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(session: AuthSession = Depends(get_current_session)):
    """Get current user information."""
    return session.user


@router.put("/me", response_model=UserResponse)
async def update_current_user(
    user_data: UserUpdate,
    session: AuthSession = Depends(require_roles(ROLE_USER)),
    auth: AuthStore = Depends(get_auth_store)
):
    """Update profile fields and optionally the password."""
    return auth.update_user_info(
        username=user_data.username,
        address=user_data.address,
        emergency_contact_name=user_data.emergency_contact_name,
        emergency_contact_phone=user_data.emergency_contact_phone,
        current_password=user_data.current_password,
        new_password=user_data.new_password
    )
