from .base import ErrorResponse, SuccessResponse
from .favorite import FavoriteCreate, FavoriteRead, FavoriteCheck
from .place import Place, CategoryRead, PlacesResponse
from .user import UserRead, UserUpsert, SessionCreate

__all__ = [
    "ErrorResponse",
    "SuccessResponse",
    "FavoriteCreate",
    "FavoriteRead",
    "FavoriteCheck",
    "Place",
    "CategoryRead",
    "PlacesResponse",
    "UserRead",
    "UserUpsert",
    "SessionCreate",
]
