"""Error Hierarchy — typed, categorized exceptions for all Bookshelf failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope used by every error handler
    - StoreError keeps the store's native code; its HTTP status follows that code

Design Decisions:
    - Single hierarchy with BookshelfError base: FastAPI global handler catches all
    - Store codes follow the P20xx numbering used by the catalog clients
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
    BAD_REQUEST = "bad_request"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


class StoreErrorCode(str, Enum):
    """Failure codes raised by the relational store."""
    UNIQUE_CONSTRAINT = "P2002"
    FOREIGN_KEY = "P2003"
    RECORD_NOT_FOUND = "P2025"
    UNKNOWN = "UNKNOWN"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    book_id: str | None = None
    user_id: str | None = None
    author_id: str | None = None
    debug_info: dict[str, Any] | None = None


class BookshelfError(Exception):
    """Base exception for all Bookshelf errors."""

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
                    "book_id": self.context.book_id,
                    "user_id": self.context.user_id,
                    "author_id": self.context.author_id,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class BadRequestError(BookshelfError):
    """Request refers to something that cannot be used."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "BAD_REQUEST", ErrorCategory.BAD_REQUEST,
            ErrorSeverity.ERROR, context, 400,
        )


class ConflictError(BookshelfError):
    """Request collides with existing data."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )


class ResourceNotFoundError(BookshelfError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


# ─── Store Errors ───────────────────────────────────────────────

_STORE_CODE_MAPPING: dict[StoreErrorCode, tuple[ErrorCategory, int]] = {
    StoreErrorCode.UNIQUE_CONSTRAINT: (ErrorCategory.CONFLICT, 409),
    StoreErrorCode.FOREIGN_KEY: (ErrorCategory.CONFLICT, 409),
    StoreErrorCode.RECORD_NOT_FOUND: (ErrorCategory.RESOURCE_NOT_FOUND, 404),
}


class StoreError(BookshelfError):
    """Relational store rejected an operation."""
    def __init__(
        self,
        store_code: StoreErrorCode,
        message: str,
        context: ErrorContext | None = None,
    ):
        category, http_status = _STORE_CODE_MAPPING.get(
            store_code, (ErrorCategory.DATABASE, 500),
        )
        super().__init__(
            message, f"STORE_{store_code.value}", category,
            ErrorSeverity.ERROR, context, http_status,
        )
        self.store_code = store_code


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(BookshelfError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
