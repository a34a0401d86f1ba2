"""Error Hierarchy — typed exceptions for faults the endpoints do not expect.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Expected failures (not found, lookup failed, ...) are NOT exceptions: they
      travel as core.outcomes.Failure values
    - to_response() produces the API error envelope {"message": ...}
    - 500-level errors never put internal details in the response body

Design Decisions:
    - Single hierarchy with LocationApiError base: one FastAPI handler catches all
    - ErrorContext as dataclass: debug info for logs, never for responses
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    DATABASE = "database"
    EXTERNAL_API = "external_api"


@dataclass
class ErrorContext:
    """Context attached to an error for logs."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    debug_info: dict[str, Any] | None = None


class LocationApiError(Exception):
    """Base exception for all Location API errors."""

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

    @property
    def public_message(self) -> str:
        if self.http_status >= 500:
            return INTERNAL_ERROR_MESSAGE
        return self.message

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        return {"message": self.public_message}


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StoreError(LocationApiError):
    """Location store operation failed at the engine/transport level."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Store {operation} failed: {message}",
            "STORE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation


class GeocoderUnavailableError(LocationApiError):
    """Geocoding provider could not be reached (connection, timeout)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Geocoding provider unavailable: {message}",
            "GEOCODER_UNAVAILABLE", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 500,
        )
