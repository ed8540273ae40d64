"""Error Hierarchy — typed, categorized exceptions for every Light API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Input errors (400-level) are recoverable; storage errors (500-level) are critical
    - to_response() produces the JSON envelope: {"message", "error": {...}}
    - Messages are client-safe; driver text only travels as __cause__ and in logs

Design Decisions:
    - Single hierarchy with LightApiError base: one FastAPI handler catches all
    - Not-found is deliberately absent: find_by_id returns None instead
"""

from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories."""
    VALIDATION = "validation"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


class LightApiError(Exception):
    """Base exception for all Light API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
        details: list[dict[str, Any]] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.details = details

    def to_response(self) -> dict:
        """Convert to the JSON error envelope."""
        error: dict[str, Any] = {
            "code": self.code,
            "category": self.category.value,
            "severity": self.severity.value,
        }
        if self.details:
            error["details"] = self.details
        return {"message": self.message, "error": error}


# ─── Input Errors (400-level) ───────────────────────────────────

class MalformedInputError(LightApiError):
    """Request body could not be parsed into the expected shape."""
    def __init__(
        self,
        message: str = "Invalid request body",
        details: list[dict[str, Any]] | None = None,
    ):
        super().__init__(
            message, "MALFORMED_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, 400, details,
        )


class ValidationError(LightApiError):
    """A required field is missing or empty."""
    def __init__(self, missing_fields: list[str]):
        super().__init__(
            "ID and Name are required", "VALIDATION_ERROR",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, 400,
            [{"field": f, "message": "must not be empty"} for f in missing_fields],
        )
        self.missing_fields = missing_fields


class DuplicateKeyError(LightApiError):
    """Insert collided with an existing primary key."""
    def __init__(self, user_id: str):
        super().__init__(
            f"User with ID '{user_id}' already exists", "DUPLICATE_KEY",
            ErrorCategory.CONFLICT, ErrorSeverity.WARNING, 409,
        )
        self.user_id = user_id


# ─── Storage Errors (500-level) ─────────────────────────────────

class StorageError(LightApiError):
    """Datastore operation failed for a reason other than absence or duplication."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            message, "STORAGE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation


class SchemaError(LightApiError):
    """Table initialization failed. Fatal at startup."""
    def __init__(self, message: str = "Failed to initialize users table"):
        super().__init__(
            message, "SCHEMA_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
