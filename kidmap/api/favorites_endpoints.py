"""
Favorites API endpoints - saved places and visited status

Every route depends on ``get_current_user_id``; the user id is never taken
from the request body or path.
"""
from typing import List

from fastapi import APIRouter, Depends, Response, status

from kidmap.core.dependencies import get_current_user_id, get_favorites_service
from kidmap.schemas.base import SuccessResponse
from kidmap.schemas.favorite import FavoriteCheck, FavoriteCreate, FavoriteRead
from kidmap.services.favorites_service import FavoritesService

router = APIRouter(prefix="/api/favorites", tags=["favorites"])


@router.get("", response_model=List[FavoriteRead])
def list_favorites(
    user_id: str = Depends(get_current_user_id),
    service: FavoritesService = Depends(get_favorites_service),
):
    favorites = service.list_favorites(user_id)
    return [FavoriteRead.model_validate(f) for f in favorites]


@router.post("", response_model=FavoriteRead)
def add_favorite(
    payload: FavoriteCreate,
    response: Response,
    user_id: str = Depends(get_current_user_id),
    service: FavoritesService = Depends(get_favorites_service),
):
    """
    Save a place.

    - **201**: the favorite was created
    - **200**: the place was already saved; the stored (first) snapshot is returned unchanged
    """
    favorite, created = service.add_favorite(user_id, payload)
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return FavoriteRead.model_validate(favorite)


@router.delete("/{place_id}", response_model=SuccessResponse)
def remove_favorite(
    place_id: str,
    user_id: str = Depends(get_current_user_id),
    service: FavoritesService = Depends(get_favorites_service),
):
    service.remove_favorite(user_id, place_id)
    return SuccessResponse()


@router.get("/{place_id}/check", response_model=FavoriteCheck)
def check_favorite(
    place_id: str,
    user_id: str = Depends(get_current_user_id),
    service: FavoritesService = Depends(get_favorites_service),
):
    return FavoriteCheck(is_favorite=service.is_favorite(user_id, place_id))


@router.patch("/{place_id}/visited", response_model=FavoriteRead)
def toggle_visited(
    place_id: str,
    user_id: str = Depends(get_current_user_id),
    service: FavoritesService = Depends(get_favorites_service),
):
    favorite = service.toggle_visited(user_id, place_id)
    return FavoriteRead.model_validate(favorite)
