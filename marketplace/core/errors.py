"""Error Hierarchy — typed, categorized exceptions for all marketplace failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Validation, not-found, conflict and storage failures are distinct types
      so the HTTP layer maps them to distinct statuses
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with MarketplaceError base: one global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    CONFLICT = "conflict"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and the response envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    idempotency_key: str | None = None


class MarketplaceError(Exception):
    """Base exception for all marketplace errors."""

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
                "details": self.details(),
            }
        }

    def details(self) -> dict:
        """Error-specific fields exposed to clients. Overridden by subclasses."""
        return {}


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationFailedError(MarketplaceError):
    """An entity failed its domain invariants."""
    def __init__(self, field: str, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Invalid {field}: {reason}",
            "VALIDATION_FAILED", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 422,
        )
        self.field = field
        self.reason = reason

    def details(self) -> dict:
        return {"field": self.field, "reason": self.reason}


class ResourceNotFoundError(MarketplaceError):
    """Requested resource does not exist."""
    def __init__(
        self, entity_kind: str, entity_id: object, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{entity_kind} '{entity_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.entity_kind = entity_kind
        self.entity_id = str(entity_id)

    def details(self) -> dict:
        return {"entity_kind": self.entity_kind, "entity_id": self.entity_id}


class DuplicateIdempotencyKeyError(MarketplaceError):
    """An idempotency record with this key already exists."""
    def __init__(self, key: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.idempotency_key = key
        super().__init__(
            f"Idempotency key '{key}' already recorded",
            "DUPLICATE_IDEMPOTENCY_KEY", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, 409,
        )
        self.key = key

    def details(self) -> dict:
        return {"key": self.key}


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageError(MarketplaceError):
    """Repository or idempotency-store operation failed."""
    def __init__(
        self, operation: str, cause: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Storage {operation} failed: {cause}",
            "STORAGE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
        self.cause = cause

    def details(self) -> dict:
        # cause stays out of the envelope: it may carry driver internals
        return {"operation": self.operation}
