from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FavoriteCreate(BaseModel):
    """Place snapshot sent by the client when saving a favorite (all strings on the wire)."""

    model_config = _CAMEL

    place_id: str = Field(min_length=1, max_length=64)
    place_name: str = Field(min_length=1, max_length=255)
    place_type: str = Field(min_length=1, max_length=32)
    place_lat: str
    place_lon: str
    place_address: Optional[str] = Field(default="", max_length=512)

    @field_validator("place_lat")
    @classmethod
    def validate_lat(cls, v: str) -> str:
        return _coordinate(v, 90.0)

    @field_validator("place_lon")
    @classmethod
    def validate_lon(cls, v: str) -> str:
        return _coordinate(v, 180.0)


def _coordinate(value: str, limit: float) -> str:
    value = value.strip()
    try:
        number = float(value)
    except ValueError:
        raise ValueError(f"'{value}' is not a number")
    if not -limit <= number <= limit:
        raise ValueError(f"{number} is outside [-{limit:g}, {limit:g}]")
    return value


class FavoriteRead(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: str
    user_id: str
    place_id: str
    place_name: str
    place_type: str
    place_lat: str
    place_lon: str
    place_address: Optional[str] = None
    visited: bool = False
    visited_at: Optional[datetime] = None
    created_at: Optional[datetime] = None


class FavoriteCheck(BaseModel):
    model_config = _CAMEL

    is_favorite: bool
