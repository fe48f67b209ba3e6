"""Category filter and name/address search over an in-memory place list."""

from typing import Iterable, List, Mapping, Optional, Sequence, Union

from kidmap.models.category import Category
from kidmap.schemas.place import Place

CategoryKey = Union[Category, str]


def _key(category: CategoryKey) -> str:
    # str() of a str-mixin Enum is "Category.PARK" on newer interpreters
    return category.value if isinstance(category, Category) else category


class FilterState:
    """
    Per-category visibility flags. Immutable: ``toggle`` returns a new state.

    A category missing from the mapping reads as off.
    """

    def __init__(self, flags: Optional[Mapping[CategoryKey, bool]] = None):
        self._flags = {_key(k): bool(v) for k, v in (flags or {}).items()}

    @classmethod
    def default(cls) -> "FilterState":
        return cls({category: True for category in Category})

    @classmethod
    def only(cls, categories: Iterable[CategoryKey]) -> "FilterState":
        """State with exactly the given categories on and every other category off."""
        enabled = {Category(_key(c)) for c in categories}
        return cls({category: category in enabled for category in Category})

    def is_enabled(self, category: CategoryKey) -> bool:
        return self._flags.get(_key(category), False)

    def toggle(self, category: CategoryKey) -> "FilterState":
        key = _key(category)
        flags = dict(self._flags)
        flags[key] = not flags.get(key, False)
        return FilterState(flags)

    def as_dict(self) -> dict:
        return dict(self._flags)

    def __eq__(self, other):
        if not isinstance(other, FilterState):
            return NotImplemented
        return self._flags == other._flags

    def __repr__(self) -> str:
        return f"FilterState({self._flags!r})"


def visible_places(places: Sequence[Place], state: FilterState) -> List[Place]:
    return [place for place in places if state.is_enabled(place.type)]


def count_by_category(places: Sequence[Place], category: CategoryKey) -> int:
    """Total places of a category, regardless of what is currently visible."""
    key = _key(category)
    return sum(1 for place in places if place.type.value == key)


def search_matches(places: Sequence[Place], query: Optional[str]) -> Optional[List[Place]]:
    """
    Case-insensitive substring match against name or address.

    Returns None for an empty or blank query: no search is active, which is
    not the same as a search that matched everything.
    """
    if not query or not query.strip():
        return None
    needle = query.strip().lower()
    return [
        place for place in places
        if needle in place.name.lower() or (place.address and needle in place.address.lower())
    ]
