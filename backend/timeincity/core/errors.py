"""Error Hierarchy — typed, categorized exceptions for TimeInCity failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope
    - A missing city is NOT an error inside core/ — lookups return None.
      ResourceNotFoundError exists only for the HTTP boundary.

Design Decisions:
    - Single hierarchy with TimeInCityError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATASET = "dataset"
    UNAVAILABLE = "unavailable"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    slug: str | None = None
    query: str | None = None
    debug_info: dict[str, Any] | None = None


class TimeInCityError(Exception):
    """Base exception for all TimeInCity errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "slug": self.context.slug,
                    "query": self.context.query,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidSearchLimitError(TimeInCityError):
    """Search limit must be a positive integer."""
    def __init__(self, limit: int, context: ErrorContext | None = None):
        super().__init__(
            f"Search limit must be a positive integer, got {limit}",
            "INVALID_SEARCH_LIMIT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.limit = limit


class ResourceNotFoundError(TimeInCityError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class CatalogUnavailableError(TimeInCityError):
    """Request arrived before the city catalog was built."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "City catalog is not loaded yet",
            "CATALOG_UNAVAILABLE", ErrorCategory.UNAVAILABLE,
            ErrorSeverity.CRITICAL, context, 503,
        )


class DatasetLoadError(TimeInCityError):
    """Raw city dataset could not be read or parsed."""
    def __init__(self, message: str, path: str, context: ErrorContext | None = None):
        super().__init__(
            f"City dataset '{path}' could not be loaded: {message}",
            "DATASET_LOAD_ERROR", ErrorCategory.DATASET,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.path = path
