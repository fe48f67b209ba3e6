"""Session token issue / verify utilities.

Session tokens are JWTs signed by the identity provider with the shared
secret from ``SECURITY_JWT_SECRET``. ``sub`` is the stable user id.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict
import logging

import jwt

from kidmap.config.settings import get_settings

logger = logging.getLogger(__name__)

PROFILE_CLAIMS = ("email", "first_name", "last_name", "profile_image_url")


def issue_session_token(subject: str, expires_minutes: int = 60, **claims: Any) -> str:
    """Sign a session token the way the identity provider does (dev tooling and tests)."""
    security = get_settings().security
    now = datetime.now(timezone.utc)
    payload: Dict[str, Any] = {
        "sub": subject,
        "iat": now,
        "exp": now + timedelta(minutes=expires_minutes),
        **{k: v for k, v in claims.items() if k in PROFILE_CLAIMS},
    }
    if security.jwt_issuer:
        payload["iss"] = security.jwt_issuer
    if security.jwt_audience:
        payload["aud"] = security.jwt_audience
    return jwt.encode(payload, security.jwt_secret, algorithm=security.jwt_algorithm)


def decode_session_token(token: str) -> Dict[str, Any] | None:
    """Return the verified claims, or None if the token is invalid, expired or has no subject."""
    security = get_settings().security
    try:
        claims = jwt.decode(
            token,
            security.jwt_secret,
            algorithms=[security.jwt_algorithm],
            issuer=security.jwt_issuer,
            audience=security.jwt_audience,
            options={"require": ["exp", "sub"]},
        )
    except jwt.PyJWTError as e:
        logger.debug(f"Rejected session token: {e}")
        return None
    if not claims.get("sub"):
        return None
    return claims
