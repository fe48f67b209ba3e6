"""
User Service - identity provider upsert contract
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from kidmap.core.db import upsert_insert
from kidmap.models.user import User
from kidmap.schemas.user import UserUpsert

logger = logging.getLogger(__name__)


class UserService:

    def __init__(self, db: Session):
        self.db = db

    def get_user(self, user_id: str) -> Optional[User]:
        stmt = select(User).where(User.id == user_id).execution_options(populate_existing=True)
        return self.db.execute(stmt).scalar_one_or_none()

    def upsert_user(self, data: UserUpsert) -> User:
        """
        Create the user if absent, otherwise overwrite the profile fields and
        stamp a fresh updated_at.
        """
        values = data.model_dump()
        profile = {k: v for k, v in values.items() if k != "id"}
        now = datetime.now(timezone.utc)

        insert = upsert_insert(self.db)
        if insert is not None:
            stmt = insert(User).values(**values)
            stmt = stmt.on_conflict_do_update(
                index_elements=[User.id],
                set_={**profile, "updated_at": now},
            )
            self.db.execute(stmt)
        else:
            user = self.db.get(User, data.id)
            if user is None:
                self.db.add(User(**values))
            else:
                for field, value in profile.items():
                    setattr(user, field, value)
                user.updated_at = now
        self.db.commit()

        logger.info(f"Upserted user {data.id}")
        return self.get_user(data.id)

    def ensure_user(self, claims: Dict[str, Any]) -> User:
        """Return the token subject's row, creating it from the claims on first sight."""
        user = self.get_user(str(claims["sub"]))
        if user is not None:
            return user
        return self.upsert_user(user_from_claims(claims))


def user_from_claims(claims: Dict[str, Any]) -> UserUpsert:
    """Map identity provider token claims onto the user record."""
    return UserUpsert(
        id=str(claims["sub"]),
        email=claims.get("email"),
        first_name=claims.get("first_name"),
        last_name=claims.get("last_name"),
        profile_image_url=claims.get("profile_image_url"),
    )
