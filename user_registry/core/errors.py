"""Error Hierarchy — typed, categorized failures for every User Registry outcome.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() returns the exact HTTP body: a list of strings for validation,
      plain text for everything else
    - Errors are returned as values by UserService (Err(error)) and raised only
      at the API boundary, where the global handler maps them to responses

Design Decisions:
    - Single hierarchy with UserRegistryError base: one FastAPI handler catches all
    - Messages are part of the public contract (clients match on them), so they
      are built here and nowhere else
"""

from datetime import date
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


class UserRegistryError(Exception):
    """Base exception for all User Registry errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> str | list[str]:
        """HTTP body for this error."""
        return self.message


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationFailedError(UserRegistryError):
    """One or more field-level validation rules failed."""
    def __init__(self, messages: list[str]):
        super().__init__(
            "; ".join(messages), "VALIDATION_FAILED", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.messages = list(messages)

    def to_response(self) -> list[str]:
        return self.messages


class IneligibleAgeError(UserRegistryError):
    """User is younger than the configured age requirement."""
    def __init__(self, min_age: int):
        super().__init__(
            f"User must be at least {min_age} years old.",
            "INELIGIBLE_AGE", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, 400,
        )
        self.min_age = min_age


class InvalidRangeError(UserRegistryError):
    """Search range start is after its end."""
    def __init__(self, date_from: date, date_to: date):
        super().__init__(
            "From date must be before To date.",
            "INVALID_RANGE", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.date_from = date_from
        self.date_to = date_to


class ResourceNotFoundError(UserRegistryError):
    """Requested user does not exist."""
    def __init__(self, user_id: int):
        super().__init__(
            f"User not found with ID: {user_id}",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, 404,
        )
        self.user_id = user_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(UserRegistryError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation
