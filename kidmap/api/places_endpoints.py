"""Place listing: fetch, classify, then apply category filters and search."""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from kidmap.core.dependencies import get_overpass_client
from kidmap.models.category import Category
from kidmap.schemas.place import CategoryRead, PlacesResponse
from kidmap.services.overpass_client import OverpassClient
from kidmap.services.place_filter import (
    FilterState,
    count_by_category,
    search_matches,
    visible_places,
)

router = APIRouter(prefix="/api", tags=["places"])


@router.get("/places", response_model=PlacesResponse)
async def get_places(
    category: Optional[List[Category]] = Query(
        None, description="Categories to show; omit to show all"
    ),
    q: Optional[str] = Query(None, max_length=200, description="Name or address search"),
    client: OverpassClient = Depends(get_overpass_client),
):
    """
    Fetch every place in the region and return the visible subset.

    `counts` are totals per category over the unfiltered list. `search_results`
    is null when no search term is given.
    """
    places = await client.fetch_places()

    state = FilterState.default() if category is None else FilterState.only(category)
    visible = visible_places(places, state)

    return PlacesResponse(
        places=visible,
        total=len(places),
        visible_count=len(visible),
        counts={c.value: count_by_category(places, c) for c in Category},
        search_results=search_matches(places, q),
    )


@router.get("/categories", response_model=List[CategoryRead])
async def list_categories():
    return [
        CategoryRead(
            key=category,
            label=category.info.label,
            description=category.info.description,
            color=category.info.color,
            icon=category.info.icon,
        )
        for category in Category
    ]
