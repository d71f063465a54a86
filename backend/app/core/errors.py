"""Error Hierarchy — typed, categorized exceptions for all Catalog API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope with a top-level "message"
    - No internal details leaked in user-facing messages (never raw passwords)

Design Decisions:
    - Single hierarchy with CatalogError base: FastAPI global handler catches all
    - Login failures reuse BadRequestError, never NotFoundError, so the response
      does not reveal whether the identifier exists
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
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"
    CONFLICT = "conflict"
    UNSUPPORTED_MEDIA = "unsupported_media"


@dataclass
class ErrorContext:
    """Context attached to an error for logs (never serialized verbatim)."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    field: str | None = None
    debug_info: dict[str, Any] | None = None


class CatalogError(Exception):
    """Base exception for all Catalog API errors."""

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
            "message": self.message,
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "field": self.context.field,
            },
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class BadRequestError(CatalogError):
    """Validation failure or business-rule violation."""
    def __init__(
        self,
        message: str,
        field: str | None = None,
        category: ErrorCategory = ErrorCategory.VALIDATION,
    ):
        super().__init__(
            message, "BAD_REQUEST", category,
            ErrorSeverity.ERROR, ErrorContext(field=field), 400,
        )
        self.field = field


class NotFoundError(CatalogError):
    """Requested resource does not exist."""
    def __init__(self, resource_type: str, resource_id: object):
        super().__init__(
            f"{resource_type} not found with id: {resource_id}",
            "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, None, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class ConflictError(CatalogError):
    """Storage-level uniqueness constraint rejected a write."""
    def __init__(
        self, message: str = "Resource already exists", field: str | None = None,
    ):
        super().__init__(
            message, "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ErrorContext(field=field), 409,
        )
        self.field = field


class UnsupportedMediaTypeError(CatalogError):
    """Write endpoint received a body that is not JSON."""
    def __init__(self, content_type: str | None):
        super().__init__(
            "Unsupported media type", "UNSUPPORTED_MEDIA_TYPE",
            ErrorCategory.UNSUPPORTED_MEDIA, ErrorSeverity.WARNING,
            ErrorContext(debug_info={"content_type": content_type}), 415,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(CatalogError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, None, 503,
        )
        self.operation = operation
