"""Request Logging Middleware: one structured log line per HTTP request.

Invariants:
    - OPTIONS (CORS preflight) requests are not logged
    - Every other request logs method, path, status_code and duration_ms
    - Request bodies are logged only when settings.log_request_bodies is set
    - Proxied requests (X-Forwarded-Host) are logged at debug level
"""

import logging
import time

from fastapi import FastAPI, Request

from task_tracker.config import Settings

logger = logging.getLogger(__name__)


def register_middleware(app: FastAPI, settings: Settings) -> None:
    """Attach the request logging middleware to the app."""

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        if request.method == "OPTIONS":
            return await call_next(request)

        if request.headers.get("x-forwarded-host"):
            logger.debug(
                "Proxied request detected",
                extra={
                    "path": request.url.path,
                    "forwarded_host": request.headers.get("x-forwarded-host"),
                    "forwarded_proto": request.headers.get("x-forwarded-proto"),
                    "forwarded_for": request.headers.get("x-forwarded-for"),
                },
            )

        if settings.log_request_bodies and request.method in ("POST", "PUT", "PATCH"):
            body = await request.body()
            logger.debug(
                f"{request.method} {request.url.path} body",
                extra={"body": body.decode("utf-8", errors="replace")},
            )

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.error(
                f"{request.method} {request.url.path} failed",
                extra=_request_extra(request, 500, started),
            )
            raise
        logger.info(
            f"{request.method} {request.url.path} {response.status_code}",
            extra=_request_extra(request, response.status_code, started),
        )
        return response


def _request_extra(request: Request, status_code: int, started: float) -> dict:
    return {
        "method": request.method,
        "path": request.url.path,
        "status_code": status_code,
        "duration_ms": round((time.perf_counter() - started) * 1000, 2),
    }
