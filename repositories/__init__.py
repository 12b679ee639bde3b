"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository, CatalogReader
from repositories.meal_repository import MealRepository

__all__ = [
    "BaseRepository",
    "CatalogReader",
    "MealRepository",
]
