"""
Shared route dependencies: storage backend, auth store and role guards.
"""
from typing import Optional
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from moodcheck.core.config import settings
from moodcheck.core.errors import AuthenticationError, PermissionDeniedError
from moodcheck.db.session import get_db
from moodcheck.services.auth_service import AuthSession, AuthStore
from moodcheck.storage.kv_store import KeyValueStore, MemoryKeyValueStore, SqlKeyValueStore

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)

# The demo backend lives for the whole process
memory_store = MemoryKeyValueStore()


def get_store(db: Session = Depends(get_db)) -> KeyValueStore:
    """Key-value store selected by STORAGE_BACKEND."""
    if settings.STORAGE_BACKEND == "memory":
        return memory_store
    return SqlKeyValueStore(db)


def get_auth_store(store: KeyValueStore = Depends(get_store)) -> AuthStore:
    # Per-request sessions come from the bearer token, never the shadow copy
    return AuthStore(store, persist_session=False)


def get_optional_session(
    token: Optional[str] = Depends(oauth2_scheme),
    auth: AuthStore = Depends(get_auth_store)
) -> Optional[AuthSession]:
    """Session for the bearer token, or None when the request is anonymous or the token is invalid."""
    if not token:
        return None
    try:
        return auth.session_from_token(token)
    except AuthenticationError:
        return None


def get_current_session(
    token: Optional[str] = Depends(oauth2_scheme),
    auth: AuthStore = Depends(get_auth_store)
) -> AuthSession:
    """Session for the bearer token; 401 without one."""
    if not token:
        raise AuthenticationError("Not authenticated")
    return auth.session_from_token(token)


def require_roles(*roles: str):
    """Dependency factory admitting only sessions whose role is in ``roles``."""
    def checker(session: AuthSession = Depends(get_current_session)) -> AuthSession:
        if session.role not in roles:
            raise PermissionDeniedError("Insufficient permissions")
        return session
    return checker
