"""
Tests for sanitization, validation and token helpers.
"""
from moodcheck.core.security import generate_secure_token, get_password_hash, verify_password
from moodcheck.core.validation import (
    is_valid_australian_phone, is_valid_email, sanitize_html,
    sanitize_text_input, sanitize_url, validate_password_strength
)


def test_sanitize_html():
    assert sanitize_html('<a href="/x">') == "&lt;a href=&quot;&#x2F;x&quot;&gt;"
    assert sanitize_html(None) == ""


def test_sanitize_text_input():
    dirty = "  hi<script>alert(1)</script> <b onclick=x>there</b>\x00 javascript:go "
    assert sanitize_text_input(dirty) == "hi <b x>there</b> go"
    assert sanitize_text_input("line\nnext") == "line\nnext"


def test_is_valid_email():
    assert is_valid_email("user.name+tag@example.com")
    assert not is_valid_email("user..name@example.com")
    assert not is_valid_email(".user@example.com")
    assert not is_valid_email("user@example")
    assert not is_valid_email("a" * 250 + "@x.com")


def test_sanitize_url():
    assert sanitize_url("https://example.com/page#frag") == "https://example.com/page"
    assert sanitize_url("javascript:alert(1)") is None
    assert sanitize_url("ftp://example.com") is None


def test_australian_phone():
    assert is_valid_australian_phone("+61 412 345 678")
    assert is_valid_australian_phone("0298765432")
    assert not is_valid_australian_phone("0112345678")
    assert not is_valid_australian_phone("")


def test_password_strength():
    assert validate_password_strength("Calm#Mind2024").is_valid
    weak = validate_password_strength("password")
    assert not weak.is_valid
    assert "Password contains common weak patterns" in weak.errors
    assert validate_password_strength(None).errors == ["Password is required"]


def test_password_hash_roundtrip():
    hashed = get_password_hash("Calm#Mind2024")
    assert verify_password("Calm#Mind2024", hashed)
    assert not verify_password("calm#mind2024", hashed)


def test_generate_secure_token():
    token = generate_secure_token(24)
    assert len(token) == 24
    assert token.isalnum()
