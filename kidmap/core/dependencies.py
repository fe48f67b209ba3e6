"""
FastAPI dependency providers.

``get_current_user_id`` is the auth gate: every favorites route depends on
it, so an unauthenticated request is rejected before the handler runs.
"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session
import logging

from kidmap.config.settings import get_settings
from kidmap.core.db import get_db
from kidmap.core.exceptions import AuthenticationError
from kidmap.core.security import decode_session_token
from kidmap.services.favorites_service import FavoritesService
from kidmap.services.overpass_client import OverpassClient
from kidmap.services.user_service import UserService

logger = logging.getLogger(__name__)


def get_favorites_service(db: Session = Depends(get_db)) -> FavoritesService:
    return FavoritesService(db)


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


def get_overpass_client() -> OverpassClient:
    return OverpassClient()


def _extract_token(request: Request) -> str | None:
    cookie_name = get_settings().security.session_cookie_name
    token = request.cookies.get(cookie_name)
    if token:
        return token

    auth_header = request.headers.get("Authorization", "")
    parts = auth_header.split()
    if len(parts) == 2 and parts[0].lower() == "bearer":
        return parts[1]
    return None


def get_current_user_id(
    request: Request,
    users: UserService = Depends(get_user_service),
) -> str:
    """
    Resolve the request's session to the authenticated user id.

    A verified subject without a user row is created from the token claims,
    so Bearer clients that never opened a cookie session still own a row.

    Raises:
        AuthenticationError: no session, or the token fails verification
    """
    token = _extract_token(request)
    if not token:
        raise AuthenticationError()

    claims = decode_session_token(token)
    if claims is None:
        logger.warning(
            "Invalid session token",
            extra={
                'request_id': getattr(request.state, 'request_id', 'unknown'),
                'path': request.url.path,
            }
        )
        raise AuthenticationError()

    user = users.ensure_user(claims)
    request.state.user_id = user.id
    return user.id
