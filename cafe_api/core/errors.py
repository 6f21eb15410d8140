"""Error Hierarchy — typed, categorized exceptions for all cafe API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) carry a fixed client-facing message
    - Infrastructure errors (500-level) are critical and raised before requests are served
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with CafeError base: one global handler catches all
    - ErrorContext as dataclass: request details for logs, never for response bodies
"""

from dataclasses import dataclass, field
from enum import Enum
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
    CONFIGURATION = "configuration"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    parameter: str | None = None
    value: str | None = None


class CafeError(Exception):
    """Base exception for all cafe API errors."""

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

    def to_log_extra(self) -> dict:
        """Fields merged into the log record for this error."""
        return {
            "error_code": self.code,
            "field": self.context.parameter,
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationError(CafeError):
    """Client input rejected; the message is the whole response body."""
    def __init__(
        self, message: str, code: str, field: str,
        value: str | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ErrorContext(parameter=field, value=value), 400,
        )
        self.field = field


class UnknownCityError(ValidationError):
    """City parameter missing or not present in the catalog."""
    def __init__(self, city: str | None = None):
        super().__init__("unknown city", "UNKNOWN_CITY", "city", city)


class InvalidCountError(ValidationError):
    """Count parameter is not a non-negative integer."""
    def __init__(self, count: str | None = None):
        super().__init__("incorrect count", "INCORRECT_COUNT", "count", count)


# ─── Infrastructure Errors (500-level) ──────────────────────────

class CatalogLoadError(CafeError):
    """Catalog file could not be read or failed validation."""
    def __init__(self, message: str, path: str):
        super().__init__(
            f"Catalog load from '{path}' failed: {message}",
            "CATALOG_LOAD_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, ErrorContext(value=path), 500,
        )
        self.path = path
