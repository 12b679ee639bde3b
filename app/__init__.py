"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and foundational application code.
"""

from app.config import settings
from app.exceptions import (
    ServiceValidationError,
    QuotaExceededError,
    InvalidDaysError,
    NotFoundError,
    CatalogUnavailableError,
)

__all__ = [
    "settings",
    "ServiceValidationError",
    "QuotaExceededError",
    "InvalidDaysError",
    "NotFoundError",
    "CatalogUnavailableError",
]
