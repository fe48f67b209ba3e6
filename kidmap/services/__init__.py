"""
Services for KidMap: place fetching/classification, filtering, favorites and users.
"""

from .overpass_client import OverpassClient, classify_elements
from .place_filter import FilterState, visible_places, count_by_category, search_matches
from .favorites_service import FavoritesService
from .user_service import UserService, user_from_claims

__all__ = [
    "OverpassClient",
    "classify_elements",
    "FilterState",
    "visible_places",
    "count_by_category",
    "search_matches",
    "FavoritesService",
    "UserService",
    "user_from_claims",
]
