"""Request Body Parsing: lenient decoding of task request bodies.

Invariants:
    - urlencoded and multipart bodies are read as forms (all values are strings)
    - Any other body is decoded as JSON whatever its Content-Type says
    - Empty body or JSON null counts as "no body"
    - Failures raise TaskValidationError: "Invalid JSON in request body",
      "Missing request body", "Invalid request body format", or the first
      schema error as "<field>: <message>"
"""

import json
from typing import Any, Callable, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from task_tracker.api.error_handlers import validation_message
from task_tracker.core.errors import TaskValidationError

_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")

SchemaT = TypeVar("SchemaT", bound=BaseModel)


async def read_body(request: Request) -> Any:
    """Decode the body to Python data, or None when nothing was sent."""
    content_type = request.headers.get("content-type", "")
    media_type = content_type.split(";", 1)[0].strip().lower()

    if media_type in _FORM_TYPES:
        form = await request.form()
        return dict(form) if form else None

    raw = await request.body()
    if not raw.strip():
        return None
    try:
        return json.loads(raw)
    except ValueError:
        raise TaskValidationError("Invalid JSON in request body")


def parsed_body(
    schema: type[SchemaT], *, required: bool = True,
) -> Callable[[Request], Any]:
    """Build a FastAPI dependency that parses the body into `schema`."""

    async def dependency(request: Request) -> SchemaT | None:
        data = await read_body(request)
        if data is None:
            if required:
                raise TaskValidationError("Missing request body")
            return None
        if not isinstance(data, dict):
            raise TaskValidationError("Invalid request body format")
        try:
            return schema.model_validate(data)
        except ValidationError as e:
            raise TaskValidationError(validation_message(e.errors()))

    return dependency
