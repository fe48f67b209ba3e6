"""Session and current-user endpoints.

The identity provider signs the session token; this service only verifies
it, upserts the user row and keeps the token in an HttpOnly cookie.
"""

from fastapi import APIRouter, Depends, Response

from kidmap.config.settings import get_settings
from kidmap.core.dependencies import get_current_user_id, get_user_service
from kidmap.core.exceptions import AuthenticationError, NotFoundError
from kidmap.core.security import decode_session_token
from kidmap.schemas.base import SuccessResponse
from kidmap.schemas.user import SessionCreate, UserRead
from kidmap.services.user_service import UserService, user_from_claims

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/session", response_model=UserRead)
def create_session(
    payload: SessionCreate,
    response: Response,
    users: UserService = Depends(get_user_service),
):
    """Exchange an identity provider token for a session cookie."""
    claims = decode_session_token(payload.token)
    if claims is None:
        raise AuthenticationError("Invalid or expired token")

    user = users.upsert_user(user_from_claims(claims))

    security = get_settings().security
    response.set_cookie(
        key=security.session_cookie_name,
        value=payload.token,
        max_age=security.session_max_age_seconds,
        httponly=True,
        secure=security.session_cookie_secure,
        samesite="lax",
    )
    return UserRead.model_validate(user)


@router.post("/logout", response_model=SuccessResponse)
def logout(response: Response):
    response.delete_cookie(get_settings().security.session_cookie_name)
    return SuccessResponse()


@router.get("/user", response_model=UserRead)
def get_current_user(
    user_id: str = Depends(get_current_user_id),
    users: UserService = Depends(get_user_service),
):
    user = users.get_user(user_id)
    if user is None:
        raise NotFoundError("User not found")
    return UserRead.model_validate(user)
