import uuid

from sqlalchemy.orm import relationship
from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    String,
    Text,
    UniqueConstraint,
    false,
    func,
)

from kidmap.core.db import Base


class Favorite(Base):
    __tablename__ = "favorites"
    __table_args__ = (
        UniqueConstraint("user_id", "place_id", name="uq_favorites_user_place"),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(255), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    place_id = Column(String(64), nullable=False)

    # snapshot of the place at save time
    place_name = Column(String(255), nullable=False)
    place_type = Column(String(32), nullable=False)
    place_lat = Column(Text, nullable=False)
    place_lon = Column(Text, nullable=False)
    place_address = Column(String(512), nullable=True)

    visited = Column(Boolean, nullable=False, default=False, server_default=false())
    visited_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    user = relationship("User", back_populates="favorites")

    def __repr__(self) -> str:  # pragma: no cover
        return f"<Favorite user_id={self.user_id} place_id={self.place_id} visited={self.visited}>"
