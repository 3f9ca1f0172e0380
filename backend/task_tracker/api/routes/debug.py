"""Debug Routes: diagnostics for client payloads.

Only registered when settings.debug_routes is true. They never touch the
database.

    POST /debug/echo            (root)        what the server decoded
    POST {prefix}/debug         (API prefix)  raw body text and its JSON parse
    POST {prefix}/debug/complete              how `completed` would be coerced
"""

import json
import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from task_tracker.api.request_body import read_body
from task_tracker.core.errors import TaskValidationError
from task_tracker.core.validators import parse_boolean

logger = logging.getLogger(__name__)
echo_router = APIRouter(prefix="/debug", tags=["debug"])
router = APIRouter(prefix="/debug", tags=["debug"])


@echo_router.post("/echo")
async def echo(request: Request):
    """Return what the server decoded from the request."""
    logger.info("Echo endpoint hit", extra={"path": request.url.path})
    return {
        "received": {
            "method": request.method,
            "url": str(request.url),
            "headers": dict(request.headers),
            "body": await read_body(request),
        },
    }


@router.post("")
async def debug_raw_body(request: Request):
    """Echo the undecoded body next to the result of parsing it as JSON."""
    raw = (await request.body()).decode("utf-8", errors="replace")
    logger.debug("Raw body debug route hit", extra={"body": raw})
    try:
        parsed = json.loads(raw) if raw.strip() else {}
    except ValueError as e:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "success": False,
                "error": f"Failed to parse body: {e}",
                "rawBody": raw,
            },
        )
    return {
        "success": True,
        "received": {
            "headers": dict(request.headers),
            "rawBody": raw,
            "parsedBody": parsed,
        },
    }


@router.post("/complete")
async def debug_complete(request: Request):
    """Show how a `completed` value would be coerced by the toggle endpoint."""
    body = await read_body(request)
    raw = body.get("completed") if isinstance(body, dict) else None
    parse_error = None
    try:
        parsed = parse_boolean(raw)
        action = "toggle" if parsed is None else "set"
    except TaskValidationError as e:
        parsed = None
        parse_error = e.message
        action = "reject"
    return {
        "success": True,
        "received": body,
        "completed": {
            "raw": raw,
            "rawType": type(raw).__name__,
            "parsed": parsed,
            "action": action,
            "error": parse_error,
        },
    }
