"""
Unit tests for session token verification
"""
from datetime import datetime, timedelta, timezone

import jwt

from kidmap.config.settings import get_settings
from kidmap.core.security import decode_session_token, issue_session_token


def test_issue_and_decode():
    token = issue_session_token("user-1", email="parent@example.com", role="admin")

    claims = decode_session_token(token)

    assert claims["sub"] == "user-1"
    assert claims["email"] == "parent@example.com"
    # only profile claims are carried
    assert "role" not in claims


def test_expired_token_is_rejected():
    token = issue_session_token("user-1", expires_minutes=-5)
    assert decode_session_token(token) is None


def test_wrong_secret_is_rejected():
    now = datetime.now(timezone.utc)
    token = jwt.encode(
        {"sub": "user-1", "exp": now + timedelta(minutes=5)},
        "some-other-secret-that-is-long-enough",
        algorithm="HS256",
    )
    assert decode_session_token(token) is None


def test_empty_subject_is_rejected():
    security = get_settings().security
    token = jwt.encode(
        {"sub": "", "exp": datetime.now(timezone.utc) + timedelta(minutes=5)},
        security.jwt_secret,
        algorithm=security.jwt_algorithm,
    )
    assert decode_session_token(token) is None


def test_garbage_is_rejected():
    assert decode_session_token("not-a-jwt") is None
