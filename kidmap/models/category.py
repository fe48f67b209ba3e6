"""
Place categories.

``Category`` is the single source of truth for classification, query
construction, display metadata and the default filter keys. Declaration
order matters: classification tests predicates in this order and the first
match wins.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional


@dataclass(frozen=True)
class CategoryInfo:
    label: str
    description: str
    color: str
    icon: str
    tag_key: str
    tag_value: str

    @property
    def query(self) -> str:
        return f"{self.tag_key}={self.tag_value}"


class Category(str, Enum):
    PLAYGROUND = "playground"
    PARK = "park"
    MUSEUM = "museum"
    GALLERY = "gallery"
    SCIENCE = "science"
    PLANETARIUM = "planetarium"

    @property
    def info(self) -> CategoryInfo:
        return CATEGORY_TABLE[self]

    @property
    def label(self) -> str:
        return self.info.label

    @property
    def singular_label(self) -> str:
        # "Museums" -> "Museum"; mirrors how place names and popups are labelled
        return self.info.label[:-1]

    def matches(self, tags: Mapping[str, str]) -> bool:
        return tags.get(self.info.tag_key) == self.info.tag_value

    @classmethod
    def classify(cls, tags: Mapping[str, str]) -> Optional["Category"]:
        """First category whose predicate matches, in declaration order; None if none do."""
        for category in cls:
            if category.matches(tags):
                return category
        return None


CATEGORY_TABLE: dict[Category, CategoryInfo] = {
    Category.PLAYGROUND: CategoryInfo(
        label="Playgrounds",
        description="Outdoor play areas",
        color="hsl(0, 0%, 100%)",
        icon="🛝",
        tag_key="leisure",
        tag_value="playground",
    ),
    Category.PARK: CategoryInfo(
        label="Parks",
        description="Green spaces & recreation",
        color="hsl(120, 70%, 35%)",
        icon="🌳",
        tag_key="leisure",
        tag_value="park",
    ),
    Category.MUSEUM: CategoryInfo(
        label="Museums",
        description="Educational exhibitions",
        color="hsl(45, 100%, 50%)",
        icon="🏛️",
        tag_key="tourism",
        tag_value="museum",
    ),
    Category.GALLERY: CategoryInfo(
        label="Galleries",
        description="Art & cultural spaces",
        color="hsl(320, 80%, 45%)",
        icon="🖼️",
        tag_key="tourism",
        tag_value="gallery",
    ),
    Category.SCIENCE: CategoryInfo(
        label="Science Centers",
        description="Interactive learning",
        color="hsl(15, 85%, 55%)",
        icon="🔬",
        tag_key="amenity",
        tag_value="science_center",
    ),
    Category.PLANETARIUM: CategoryInfo(
        label="Planetariums",
        description="Space & astronomy",
        color="hsl(280, 70%, 50%)",
        icon="🌟",
        tag_key="amenity",
        tag_value="planetarium",
    ),
}
