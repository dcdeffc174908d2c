"""Error Hierarchy — typed, categorized exceptions for all Munro API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Query validation errors (400-level) are always recoverable
    - Dataset load errors are returned by the loader, never raised to the process
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with MunroApiError base: FastAPI global handler catches all
      (uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATASET = "dataset"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    parameter: str | None = None
    running_number: int | None = None
    source: str | None = None


class MunroApiError(Exception):
    """Base exception for all Munro API errors."""

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
                    "parameter": self.context.parameter,
                    "running_number": self.context.running_number,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class QueryValidationError(MunroApiError):
    """Query criteria out of contract (negative height, bad limit, max < min)."""
    def __init__(
        self, message: str, parameter: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.parameter = parameter
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.parameter = parameter


class ResourceNotFoundError(MunroApiError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"There is no {resource_type} with this id: {resource_id}",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


# ─── Dataset Errors (500-level, fail-open) ──────────────────────

class DatasetLoadError(MunroApiError):
    """Dataset could not be loaded. Process keeps running with zero records."""
    def __init__(
        self,
        message: str,
        source: str,
        code: str = "DATASET_LOAD_ERROR",
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.source = source
        super().__init__(
            message, code, ErrorCategory.DATASET,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.source = source


class DatasetSourceNotFoundError(DatasetLoadError):
    """Dataset file is missing."""
    def __init__(self, source: str, context: ErrorContext | None = None):
        super().__init__(
            f"Dataset source not found: {source}", source,
            "DATASET_SOURCE_NOT_FOUND", context,
        )
