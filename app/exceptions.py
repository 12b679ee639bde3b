from typing import Any, Mapping, Optional


class ServiceValidationError(Exception):
    """Raised when input data is invalid or a precondition for a service call is not met.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, validation info)
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers (400)
    """

    http_status = 400

    def __init__(self, message: str = "Invalid input", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class QuotaExceededError(ServiceValidationError):
    """Raised when the positive protein quotas of a menu request sum past the cap.

    Attributes:
        total: the computed sum of positive quota values
        max_total: the fixed cap the total was checked against
    """

    def __init__(self, total: int, max_total: int):
        super().__init__(
            f"Total protein selections cannot exceed {max_total}. Current total: {total}",
            details={"total": total, "max_total": max_total},
            code="QUOTA_EXCEEDED",
        )
        self.total = total
        self.max_total = max_total


class InvalidDaysError(ServiceValidationError):
    """Raised when a menu is requested for fewer than one day."""

    def __init__(self, days: int):
        super().__init__(
            f"Menu days must be at least 1. Requested: {days}",
            details={"days": days},
            code="INVALID_DAYS",
        )
        self.days = days


class NotFoundError(Exception):
    """Raised when a requested resource was not found.

    Attributes are similar to ServiceValidationError. http_status is 404.
    """

    http_status = 404

    def __init__(self, message: str = "Not found", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class CatalogUnavailableError(Exception):
    """Raised when the meal catalog store cannot be read.

    Wraps the underlying driver/ORM error (available as ``__cause__``).
    http_status is 503.
    """

    http_status = 503

    def __init__(self, message: str = "Meal catalog unavailable", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = "CATALOG_UNAVAILABLE"):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message
