"""
Authentication routes for registration, login, logout and the current session.
"""
from fastapi import APIRouter, Depends, status
from moodcheck.schemas.user import UserCreate, UserLogin, Token, UserResponse, SessionResponse
from moodcheck.services.auth_service import AuthSession, AuthStore
from moodcheck.api.dependencies import get_auth_store, get_current_session

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(user_data: UserCreate, auth: AuthStore = Depends(get_auth_store)):
    """
    Register a new user.

    The requested role is stored as given, so this endpoint can create
    admin accounts; put it behind a gateway rule if that matters.
    """
    return auth.register(
        username=user_data.username,
        email=user_data.email,
        password=user_data.password,
        address=user_data.address,
        emergency_contact_name=user_data.emergency_contact_name,
        emergency_contact_phone=user_data.emergency_contact_phone,
        role=user_data.role
    )


@router.post("/login", response_model=Token)
async def login(credentials: UserLogin, auth: AuthStore = Depends(get_auth_store)):
    """Login and get JWT token."""
    session = auth.login(credentials.email, credentials.password)
    return {
        "access_token": session.token,
        "token_type": "bearer",
        "role": session.role,
        "user": session.user
    }


@router.post("/logout")
async def logout(
    session: AuthSession = Depends(get_current_session),
    auth: AuthStore = Depends(get_auth_store)
):
    """Logout. Tokens are stateless, so the client discards its copy."""
    auth.logout()
    return {"message": "Logged out successfully"}


@router.get("/session", response_model=SessionResponse)
async def current_session(session: AuthSession = Depends(get_current_session)):
    """Get the session derived from the bearer token."""
    return {"user": session.user, "role": session.role}
