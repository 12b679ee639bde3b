"""Services package - Business logic layer"""

from services.meal_service import MealService
from services.menu_service import MenuService
from services.weather_service import WeatherService

__all__ = [
    "MealService",
    "MenuService",
    "WeatherService",
]
