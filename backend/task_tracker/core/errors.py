"""Error Hierarchy: typed, categorized exceptions for all task tracker failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors are 400/404; infrastructure errors are 500
    - to_response() produces the REST envelope {"error": message}
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with TaskTrackerError base: one FastAPI handler catches all
    - ErrorContext as dataclass: observability data stays off the wire
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


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
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    task_id: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class TaskTrackerError(Exception):
    """Base exception for all task tracker errors."""

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
        """Convert to the REST error envelope."""
        return {"error": self.message}

    def log_extra(self) -> dict:
        """Fields surfaced by the JSON log formatter."""
        return {
            "error_code": self.code,
            "task_id": self.context.task_id,
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class TaskValidationError(TaskTrackerError):
    """A request field is missing or invalid."""
    def __init__(
        self, message: str, field: str | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field


class TaskNotFoundError(TaskTrackerError):
    """Operation targeted a task that does not exist."""
    def __init__(self, task_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.task_id = task_id
        super().__init__(
            f'Task with id "{task_id}" not found.',
            "TASK_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.task_id = task_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(TaskTrackerError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation
