"""API routes package"""

from . import health, meals, menu, weather

__all__ = ["health", "meals", "menu", "weather"]
