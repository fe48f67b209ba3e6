"""
Favorites Service - per-user saved places with visited status
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from sqlalchemy import case, delete, false, not_, null, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from kidmap.core.db import upsert_insert
from kidmap.core.exceptions import NotFoundError, ValidationError
from kidmap.models.category import Category
from kidmap.models.favorite import Favorite
from kidmap.schemas.favorite import FavoriteCreate

logger = logging.getLogger(__name__)


class FavoritesService:
    """CRUD and visited toggle over favorites, always scoped to one user id"""

    def __init__(self, db: Session):
        self.db = db

    def list_favorites(self, user_id: str) -> List[Favorite]:
        stmt = select(Favorite).where(Favorite.user_id == user_id)
        return list(self.db.execute(stmt).scalars().all())

    def get_favorite(self, user_id: str, place_id: str) -> Optional[Favorite]:
        stmt = select(Favorite).where(
            Favorite.user_id == user_id,
            Favorite.place_id == place_id
        ).execution_options(populate_existing=True)
        return self.db.execute(stmt).scalar_one_or_none()

    def is_favorite(self, user_id: str, place_id: str) -> bool:
        stmt = select(Favorite.id).where(
            Favorite.user_id == user_id,
            Favorite.place_id == place_id
        )
        return self.db.execute(stmt).first() is not None

    def add_favorite(self, user_id: str, snapshot: FavoriteCreate) -> Tuple[Favorite, bool]:
        """
        Save a place for a user.

        An existing (user, place) row is left untouched: the first snapshot
        wins and the stored row is returned.

        Args:
            user_id: Authenticated user id
            snapshot: Place fields captured at save time

        Returns:
            (stored favorite, whether this call created it)

        Raises:
            ValidationError: place type is not a known category
        """
        try:
            Category(snapshot.place_type)
        except ValueError:
            raise ValidationError(
                f"Unknown place type '{snapshot.place_type}'",
                details={"allowed": [c.value for c in Category]},
            )

        values = dict(
            user_id=user_id,
            place_id=snapshot.place_id,
            place_name=snapshot.place_name,
            place_type=snapshot.place_type,
            place_lat=snapshot.place_lat,
            place_lon=snapshot.place_lon,
            place_address=snapshot.place_address,
        )

        insert = upsert_insert(self.db)
        if insert is not None:
            stmt = (
                insert(Favorite)
                .values(**values)
                .on_conflict_do_nothing(index_elements=["user_id", "place_id"])
                .returning(Favorite.id)
            )
            created = self.db.execute(stmt).first() is not None
            self.db.commit()
        else:
            created = self._insert_if_absent(values)

        if not created:
            logger.info(
                f"Favorite already exists for user {user_id}, place {snapshot.place_id}; keeping first snapshot"
            )

        return self.get_favorite(user_id, snapshot.place_id), created

    def _insert_if_absent(self, values: dict) -> bool:
        self.db.add(Favorite(**values))
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            if self.is_favorite(values["user_id"], values["place_id"]):
                return False
            raise
        return True

    def remove_favorite(self, user_id: str, place_id: str) -> None:
        """Delete the favorite if present; a missing row is not an error."""
        stmt = delete(Favorite).where(
            Favorite.user_id == user_id,
            Favorite.place_id == place_id
        ).execution_options(synchronize_session=False)
        self.db.execute(stmt)
        self.db.commit()

    def toggle_visited(self, user_id: str, place_id: str) -> Favorite:
        """
        Flip the visited flag in one UPDATE statement.

        visited_at is set when the row becomes visited and cleared when it
        becomes unvisited, in the same statement as the flag, so concurrent
        toggles cannot lose an update.

        Raises:
            NotFoundError: no favorite for (user_id, place_id); nothing is written
        """
        now = datetime.now(timezone.utc)
        stmt = (
            update(Favorite)
            .where(
                Favorite.user_id == user_id,
                Favorite.place_id == place_id
            )
            .values(
                visited=not_(Favorite.visited),
                visited_at=case((Favorite.visited == false(), now), else_=null()),
            )
            .returning(Favorite.id)
            .execution_options(synchronize_session=False)
        )
        row = self.db.execute(stmt).first()
        if row is None:
            self.db.rollback()
            raise NotFoundError("Favorite not found", details={"place_id": place_id})

        self.db.commit()
        return self.get_favorite(user_id, place_id)
