"""
Input sanitization and validation helpers.
"""
import re
from typing import List, Optional
from urllib.parse import urlsplit, urlunsplit

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
AUSTRALIAN_PHONE_PATTERN = re.compile(r"^(\+61|0)[2-9]\d{8}$")
CONTROL_CHARS_PATTERN = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")
SCRIPT_TAG_PATTERN = re.compile(r"<script[^>]*>.*?</script>", re.IGNORECASE)
IFRAME_TAG_PATTERN = re.compile(r"<iframe[^>]*>.*?</iframe>", re.IGNORECASE)
JS_URL_PATTERN = re.compile(r"javascript:", re.IGNORECASE)
EVENT_HANDLER_PATTERN = re.compile(r"on\w+\s*=", re.IGNORECASE)
SPECIAL_CHAR_PATTERN = re.compile(r"[!@#$%^&*()_+\-=\[\]{};':\"\\|,.<>/?]")
WEAK_PASSWORD_PATTERNS = [
    re.compile(r"(.)\1{3,}"),  # same character repeated 4+ times
    re.compile(r"123456|password|qwerty|abc123", re.IGNORECASE),
]

HTML_ESCAPES = [
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#x27;"),
    ("/", "&#x2F;"),
]

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 128
EMAIL_MAX_LENGTH = 254


def sanitize_html(value) -> str:
    """Escape characters that are significant in HTML. Non-strings become ''."""
    if not isinstance(value, str):
        return ""
    # & first so the other entities are not double-escaped
    for char, entity in HTML_ESCAPES:
        value = value.replace(char, entity)
    return value


def sanitize_text_input(value) -> str:
    """
    Strip control characters, script/iframe blocks, javascript: URLs and
    inline event handlers from free text, then trim whitespace.
    Newline, tab and carriage return are kept.
    """
    if not isinstance(value, str):
        return ""
    value = CONTROL_CHARS_PATTERN.sub("", value)
    value = SCRIPT_TAG_PATTERN.sub("", value)
    value = IFRAME_TAG_PATTERN.sub("", value)
    value = JS_URL_PATTERN.sub("", value)
    value = EVENT_HANDLER_PATTERN.sub("", value)
    return value.strip()


def is_valid_email(email) -> bool:
    """Check email format plus length and dot placement."""
    if not email or not isinstance(email, str):
        return False
    if len(email) > EMAIL_MAX_LENGTH:
        return False
    if ".." in email:
        return False
    if email.startswith(".") or email.endswith("."):
        return False
    return EMAIL_PATTERN.match(email) is not None


def sanitize_url(url) -> Optional[str]:
    """Return the URL without its fragment, or None unless it is http(s)."""
    if not url or not isinstance(url, str):
        return None
    try:
        parts = urlsplit(url.strip())
    except ValueError:
        return None
    if parts.scheme.lower() not in ("http", "https") or not parts.netloc:
        return None
    return urlunsplit((parts.scheme.lower(), parts.netloc, parts.path or "/", parts.query, ""))


def is_valid_australian_phone(phone) -> bool:
    """Accept +61 or 0 prefixed Australian numbers, whitespace ignored."""
    if not phone or not isinstance(phone, str):
        return False
    clean_phone = re.sub(r"\s", "", phone)
    return AUSTRALIAN_PHONE_PATTERN.match(clean_phone) is not None


class PasswordCheck:
    """Result of a password strength check."""
    def __init__(self, errors: List[str]):
        self.errors = errors

    @property
    def is_valid(self) -> bool:
        return not self.errors


def validate_password_strength(password) -> PasswordCheck:
    """Collect every rule the password breaks."""
    errors = []

    if not password or not isinstance(password, str):
        errors.append("Password is required")
        return PasswordCheck(errors)

    if len(password) < PASSWORD_MIN_LENGTH:
        errors.append(f"Password must be at least {PASSWORD_MIN_LENGTH} characters long")
    if len(password) > PASSWORD_MAX_LENGTH:
        errors.append(f"Password must not exceed {PASSWORD_MAX_LENGTH} characters")
    if not re.search(r"[a-z]", password):
        errors.append("Password must contain at least one lowercase letter")
    if not re.search(r"[A-Z]", password):
        errors.append("Password must contain at least one uppercase letter")
    if not re.search(r"\d", password):
        errors.append("Password must contain at least one number")
    if not SPECIAL_CHAR_PATTERN.search(password):
        errors.append("Password must contain at least one special character")

    for pattern in WEAK_PASSWORD_PATTERNS:
        if pattern.search(password):
            errors.append("Password contains common weak patterns")
            break

    return PasswordCheck(errors)
