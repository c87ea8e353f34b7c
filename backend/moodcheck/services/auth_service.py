"""
Authentication store: user records, credential checks and the current session.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from moodcheck.core.config import settings
from moodcheck.core.errors import (
    AuthenticationError, ConflictError, InvalidCredentialsError,
    InvalidInputError, NotFoundError, RateLimitError
)
from moodcheck.core.rate_limit import check_rate_limit, reset_rate_limit
from moodcheck.core.security import (
    create_access_token, decode_access_token, get_password_hash, verify_password
)
from moodcheck.core.validation import (
    is_valid_australian_phone, is_valid_email, sanitize_text_input,
    validate_password_strength
)
from moodcheck.storage.kv_store import KeyValueStore

logger = logging.getLogger(__name__)

USERS_KEY = "auth_users_v1"
SESSION_KEY = "auth_session_v1"

ROLE_USER = "user"
ROLE_ADMIN = "admin"
ROLES = (ROLE_USER, ROLE_ADMIN)

PUBLIC_USER_FIELDS = (
    "email", "username", "address",
    "emergency_contact_name", "emergency_contact_phone",
)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def public_user(record: Dict[str, Any]) -> Dict[str, Any]:
    """User fields safe to hand to a client (no password hash)."""
    return {field: record.get(field) or "" for field in PUBLIC_USER_FIELDS}


class AuthSession:
    """Authenticated identity held by a running store instance."""

    def __init__(self, user: Dict[str, Any], role: str, token: str):
        self.user = user
        self.role = role
        self.token = token

    @property
    def email(self) -> str:
        return self.user["email"]

    def to_dict(self) -> Dict[str, Any]:
        return {"user": self.user, "role": self.role, "token": self.token}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Optional["AuthSession"]:
        try:
            return cls(user=dict(data["user"]), role=data["role"], token=data["token"])
        except (KeyError, TypeError):
            return None


class AuthStore:
    """
    Session lifecycle over the key-value store.

    ``session`` is None until a successful login. When ``persist_session`` is
    set, the last established session is shadowed under SESSION_KEY so that
    ``restore`` can pick it up in a fresh instance.
    """

    def __init__(self, store: KeyValueStore, persist_session: Optional[bool] = None):
        self.store = store
        self.persist_session = settings.PERSIST_SESSION if persist_session is None else persist_session
        self.session: Optional[AuthSession] = None

    # --- state -----------------------------------------------------------

    @property
    def is_authed(self) -> bool:
        return self.session is not None

    @property
    def role(self) -> Optional[str]:
        return self.session.role if self.session else None

    @property
    def user(self) -> Optional[Dict[str, Any]]:
        return self.session.user if self.session else None

    def _set_session(self, session: Optional[AuthSession]) -> None:
        self.session = session
        if not self.persist_session:
            return
        if session is None:
            self.store.remove(SESSION_KEY)
        else:
            self.store.set(SESSION_KEY, session.to_dict())

    def restore(self) -> Optional[AuthSession]:
        """Reload the shadow session, dropping it if its user is gone or its token expired."""
        data = self.store.get(SESSION_KEY)
        session = AuthSession.from_dict(data) if data else None
        if session and (self.get_user(session.email) is None or decode_access_token(session.token) is None):
            session = None
            self.store.remove(SESSION_KEY)
        self.session = session
        return session

    # --- user records ----------------------------------------------------

    def _load_users(self) -> Dict[str, Dict[str, Any]]:
        users = self.store.get(USERS_KEY, {})
        return users if isinstance(users, dict) else {}

    def _save_users(self, users: Dict[str, Dict[str, Any]]) -> None:
        self.store.set(USERS_KEY, users)

    def get_user(self, email: str) -> Optional[Dict[str, Any]]:
        return self._load_users().get(normalize_email(email))

    # --- operations ------------------------------------------------------

    def register(
        self,
        username: str,
        email: str,
        password: str,
        address: str = "",
        emergency_contact_name: str = "",
        emergency_contact_phone: str = "",
        role: str = ROLE_USER
    ) -> Dict[str, Any]:
        """Create a user record. Does not sign the new user in."""
        email = normalize_email(email)
        if not is_valid_email(email):
            raise InvalidInputError("Invalid email address")
        users = self._load_users()
        if email in users:
            raise ConflictError("User already exists")
        if role not in ROLES:
            raise InvalidInputError(f"Unknown role: {role}")
        username = sanitize_text_input(username)
        if not username:
            raise InvalidInputError("Username is required")
        if emergency_contact_phone and not is_valid_australian_phone(emergency_contact_phone):
            raise InvalidInputError("Invalid emergency contact phone number")
        check = validate_password_strength(password)
        if not check.is_valid:
            raise InvalidInputError("Password is too weak", errors=check.errors)

        record = {
            "email": email,
            "password_hash": get_password_hash(password),
            "username": username,
            "role": role,
            "address": sanitize_text_input(address),
            "emergency_contact_name": sanitize_text_input(emergency_contact_name),
            "emergency_contact_phone": (emergency_contact_phone or "").strip(),
            "created_at": _now(),
            "updated_at": None,
        }
        users[email] = record
        self._save_users(users)
        logger.info(f"Registered {role} account for {email}")
        return public_user(record)

    def login(self, email: str, password: str) -> AuthSession:
        """Check credentials and establish a session with the stored role."""
        email = normalize_email(email)
        limit_key = f"login:{email}"
        limit = check_rate_limit(
            self.store, limit_key,
            max_attempts=settings.LOGIN_MAX_ATTEMPTS,
            window_seconds=settings.LOGIN_WINDOW_SECONDS
        )
        if not limit.is_allowed:
            logger.warning(f"Login rate limit reached for {email}")
            raise RateLimitError("Too many login attempts. Please try again later.", limit.reset_time)

        record = self.get_user(email)
        if record is None:
            limit.add_attempt()
            logger.warning(f"Login attempt for unknown account {email}")
            raise NotFoundError("User not found")
        if not verify_password(password or "", record["password_hash"]):
            limit.add_attempt()
            logger.warning(f"Invalid password for {email}")
            raise InvalidCredentialsError("Invalid credentials")

        reset_rate_limit(self.store, limit_key)
        role = record.get("role") or ROLE_USER
        token = create_access_token(data={"sub": email, "role": role})
        session = AuthSession(user=public_user(record), role=role, token=token)
        self._set_session(session)
        logger.info(f"{email} signed in as {role}")
        return session

    def logout(self) -> None:
        if self.session:
            logger.info(f"{self.session.email} signed out")
        self._set_session(None)

    def session_from_token(self, token: str) -> AuthSession:
        """Re-derive a session from a bearer token and a live user lookup."""
        payload = decode_access_token(token) if token else None
        email = payload.get("sub") if payload else None
        record = self.get_user(email) if email else None
        if record is None:
            raise AuthenticationError("Could not validate credentials")
        self.session = AuthSession(user=public_user(record), role=record.get("role") or ROLE_USER, token=token)
        return self.session

    def update_user_info(
        self,
        username: str,
        address: str = "",
        emergency_contact_name: str = "",
        emergency_contact_phone: str = "",
        current_password: Optional[str] = None,
        new_password: Optional[str] = None
    ) -> Dict[str, Any]:
        """Update profile fields and, when both passwords are given, the password."""
        if self.session is None:
            raise AuthenticationError("User not authenticated")

        users = self._load_users()
        record = users.get(self.session.email)
        if record is None:
            raise NotFoundError("User not found")

        username = sanitize_text_input(username)
        if not username:
            raise InvalidInputError("Username is required")
        if emergency_contact_phone and not is_valid_australian_phone(emergency_contact_phone):
            raise InvalidInputError("Invalid emergency contact phone number")

        if current_password and new_password:
            if not verify_password(current_password, record["password_hash"]):
                raise InvalidCredentialsError("Current password incorrect")
            check = validate_password_strength(new_password)
            if not check.is_valid:
                raise InvalidInputError("Password is too weak", errors=check.errors)
            record["password_hash"] = get_password_hash(new_password)
            logger.info(f"Password changed for {self.session.email}")

        record.update({
            "username": username,
            "address": sanitize_text_input(address),
            "emergency_contact_name": sanitize_text_input(emergency_contact_name),
            "emergency_contact_phone": (emergency_contact_phone or "").strip(),
            "updated_at": _now(),
        })
        users[self.session.email] = record
        self._save_users(users)

        self._set_session(AuthSession(user=public_user(record), role=self.session.role, token=self.session.token))
        return self.session.user
