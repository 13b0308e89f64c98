"""Error Hierarchy — typed, categorized exceptions for all bizcard failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the structured REST envelope
    - AuthenticationError is the exception: rendered as the legacy 200 + status:false body
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with BizcardError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from bizcard.core.domain_types import AuthFailure


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: int | None = None
    path: str | None = None
    debug_info: dict[str, Any] | None = None


class BizcardError(Exception):
    """Base exception for all bizcard errors."""

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
    def retryable(self) -> bool:
        return False

    def to_response(self) -> dict:
        """Convert to standardized REST error response.

        status/message sit at the top level because mobile clients branch on them.
        """
        return {
            "status": False,
            "message": self.message,
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "retryable": self.retryable,
                "timestamp": self.context.timestamp.isoformat(),
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidInputError(BizcardError):
    """A value outside the accepted domain reached an operation (programmer error)."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class AuthenticationError(BizcardError):
    """Request credentials were rejected by the authenticator."""
    def __init__(self, failure: AuthFailure, context: ErrorContext | None = None):
        super().__init__(
            f"Authentication rejected: {failure.value}",
            failure.name, ErrorCategory.AUTHENTICATION,
            ErrorSeverity.INFO, context, 200,
        )
        self.failure = failure


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(BizcardError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class StorageUnavailableError(BizcardError):
    """User lookup could not reach the relational store during authentication."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "STORAGE_UNAVAILABLE", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )

    @property
    def retryable(self) -> bool:
        return True
