"""Error Handlers: global exception handlers for the task tracker API.

Invariants:
    - TaskTrackerError -> its http_status with {"error": message}
    - RequestValidationError -> 400 with a single human-readable message
    - HTTPException (unknown route, wrong method) -> its status with {"error": detail}
    - Exception (catch-all) -> 500, never leaks internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from task_tracker.core.errors import ErrorSeverity, TaskTrackerError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_task_tracker_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_task_tracker_error_handler(app: FastAPI) -> None:

    @app.exception_handler(TaskTrackerError)
    async def task_tracker_error_handler(request: Request, exc: TaskTrackerError):
        """Handle all domain/infrastructure errors."""
        level = (
            logging.ERROR if exc.severity == ErrorSeverity.CRITICAL
            else logging.WARNING
        )
        logger.log(
            level, f"{type(exc).__name__}: {exc.message}",
            extra={**exc.log_extra(), "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle request parsing errors (bad JSON, wrong types, missing body)."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": validation_message(exc.errors())},
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.method} {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal Server Error"},
        )


def validation_message(errors) -> str:
    """Collapse Pydantic error details into the first actionable message."""
    if not errors:
        return "Invalid request data"
    first = errors[0]
    loc = tuple(first.get("loc", ()))
    if first.get("type") == "json_invalid":
        return "Invalid JSON in request body"
    if loc == ("body",):
        if first.get("type") == "missing":
            return "Missing request body"
        return "Invalid request body format"
    field = str(loc[-1]) if loc else "request"
    return f"{field}: {first.get('msg', 'invalid value')}"
