"""
Models package for KidMap.

ORM tables (users, favorites) and the place category table.
"""

from .category import Category, CategoryInfo, CATEGORY_TABLE
from .user import User
from .favorite import Favorite

__all__ = [
    "Category",
    "CategoryInfo",
    "CATEGORY_TABLE",
    "User",
    "Favorite",
]
