from typing import Dict, List, Optional
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, Field, computed_field

from kidmap.models.category import Category

DIRECTIONS_URL = "https://www.google.com/maps/dir/"


class Place(BaseModel):
    """A classified point of interest. Built fresh on every fetch and never mutated."""

    model_config = ConfigDict(frozen=True)

    id: int
    osm_type: str
    type: Category
    name: str
    lat: float
    lon: float
    address: str = ""
    website: Optional[str] = None
    phone: Optional[str] = None
    description: Optional[str] = None
    tags: Dict[str, str] = Field(default_factory=dict)

    @computed_field
    @property
    def directions_url(self) -> str:
        return DIRECTIONS_URL + "?" + urlencode({"api": 1, "destination": f"{self.lat},{self.lon}"})


class CategoryRead(BaseModel):
    key: Category
    label: str
    description: str
    color: str
    icon: str


class PlacesResponse(BaseModel):
    places: List[Place]
    total: int
    visible_count: int
    counts: Dict[str, int]
    search_results: Optional[List[Place]] = None
