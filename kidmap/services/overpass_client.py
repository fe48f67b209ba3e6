"""
Overpass place fetcher and classifier.

One bulk query over the configured bounding box; each returned element is
classified against the category table and turned into a ``Place``. The
client keeps no state between calls, so every fetch is a full re-fetch.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

import httpx

from kidmap.config.settings import OverpassSettings, get_settings
from kidmap.core.exceptions import NetworkError
from kidmap.models.category import Category
from kidmap.schemas.place import Place

logger = logging.getLogger(__name__)

ELEMENT_TYPES = ("node", "way", "relation")
ADDRESS_PARTS = ("addr:housenumber", "addr:street", "addr:city", "addr:postcode")


class OverpassClient:
    """Client for the Overpass interpreter endpoint."""

    def __init__(
        self,
        overpass_settings: Optional[OverpassSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = overpass_settings or get_settings().overpass
        self.api_url = self.settings.api_url
        self.timeout = self.settings.timeout_seconds
        self._transport = transport

    def build_query(self) -> str:
        """Overpass QL union of every category predicate inside the bounding box."""
        s = self.settings
        selectors = []
        for category in Category:
            info = category.info
            for element_type in ELEMENT_TYPES:
                selectors.append(f'  {element_type}["{info.tag_key}"="{info.tag_value}"];')

        return "\n".join([
            f"[bbox:{s.south},{s.west},{s.north},{s.east}]"
            f"[out:json][timeout:{s.query_timeout}];",
            "(",
            *selectors,
            ");",
            "out center meta;",
        ])

    async def fetch_places(self) -> List[Place]:
        """
        Fetch and classify every place in the bounding box.

        Returns:
            Places in source order

        Raises:
            NetworkError: transport failure, non-success status or an unreadable body
        """
        query = self.build_query()
        logger.info(f"Fetching places from {self.api_url}")

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(self.api_url, data={"data": query})
        except httpx.HTTPError as e:
            logger.error(f"Overpass request failed: {type(e).__name__}: {e}")
            raise NetworkError(
                "Failed to reach the place service",
                details={"reason": type(e).__name__},
            ) from e

        if not response.is_success:
            logger.error(f"Overpass returned {response.status_code}")
            raise NetworkError(
                f"HTTP error! status: {response.status_code}",
                details={"status": response.status_code},
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise NetworkError("Place service returned an unreadable response") from e

        elements = payload.get("elements") or []
        places = classify_elements(elements)
        logger.info(f"Classified {len(places)} of {len(elements)} elements")
        return places


def classify_elements(elements: Iterable[Dict[str, Any]]) -> List[Place]:
    """Classify raw Overpass elements, dropping anything unplaceable. Source order is kept."""
    places = []
    for element in elements:
        place = classify_element(element)
        if place is not None:
            places.append(place)
    return places


def classify_element(element: Dict[str, Any]) -> Optional[Place]:
    coordinates = resolve_coordinates(element)
    if coordinates is None:
        return None

    tags = element.get("tags") or {}
    category = Category.classify(tags)
    if category is None:
        return None

    lat, lon = coordinates
    return Place(
        id=element["id"],
        osm_type=element.get("type", "node"),
        type=category,
        name=tags.get("name") or f"Unnamed {category.singular_label}",
        lat=lat,
        lon=lon,
        address=build_address(tags),
        website=tags.get("website") or None,
        phone=tags.get("phone") or None,
        description=tags.get("description") or None,
        tags=tags,
    )


def resolve_coordinates(element: Dict[str, Any]) -> Optional[Tuple[float, float]]:
    """Direct lat/lon if present, else the centroid ways and relations carry."""
    lat, lon = element.get("lat"), element.get("lon")
    if lat is not None and lon is not None:
        return float(lat), float(lon)

    center = element.get("center") or {}
    lat, lon = center.get("lat"), center.get("lon")
    if lat is not None and lon is not None:
        return float(lat), float(lon)

    return None


def build_address(tags: Dict[str, str]) -> str:
    address = " ".join(tags[part] for part in ADDRESS_PARTS if tags.get(part))
    return address or tags.get("addr:full") or ""
