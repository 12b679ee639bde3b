"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.meal_schemas import (
    MealBase,
    MealCreate,
    MealResponse,
    FilterOptionsResponse,
)
from domain.schemas.menu_schemas import MenuGenerateRequest
from domain.schemas.weather_schemas import WeatherDay

__all__ = [
    # Meal schemas
    "MealBase",
    "MealCreate",
    "MealResponse",
    "FilterOptionsResponse",
    # Menu schemas
    "MenuGenerateRequest",
    # Weather schemas
    "WeatherDay",
]
