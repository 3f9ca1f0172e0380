"""Input Validators: pure checks and normalizations for task fields.

Invariants:
    - Every function either returns a normalized value or raises TaskValidationError
    - No IO, no ORM imports: usable from schemas, services and tests alike
    - Titles come back trimmed; colors come back as TaskColor members
"""

from typing import Any

from task_tracker.core.domain_types import (
    TASK_ID_MAX_LENGTH, TITLE_MAX_LENGTH, TaskColor, TaskId,
)
from task_tracker.core.errors import TaskValidationError

_TRUE_STRINGS = frozenset({"true", "1", "yes", "on"})
_FALSE_STRINGS = frozenset({"false", "0", "no", "off"})


def validate_task_id(task_id: Any) -> TaskId:
    if not isinstance(task_id, str) or not task_id.strip():
        raise TaskValidationError(
            "A valid task id must be provided.", field="id",
        )
    if task_id != task_id.strip() or len(task_id) > TASK_ID_MAX_LENGTH:
        raise TaskValidationError("Task id appears invalid.", field="id")
    return TaskId(task_id)


def validate_title(title: Any) -> str:
    """Trim and bound-check a title. Returns the trimmed title."""
    if not isinstance(title, str) or not title.strip():
        raise TaskValidationError("Title is required.", field="title")
    title = title.strip()
    if len(title) > TITLE_MAX_LENGTH:
        raise TaskValidationError(
            f"Title must be at most {TITLE_MAX_LENGTH} characters.",
            field="title",
        )
    return title


def normalize_color(color: Any) -> TaskColor:
    """Coerce a wire color ("blue", " Blue ", TaskColor.BLUE) to a TaskColor.

    Matching is case-insensitive and ignores surrounding whitespace.
    """
    if isinstance(color, TaskColor):
        return color
    if color is None or (isinstance(color, str) and not color.strip()):
        raise TaskValidationError("Color is required.", field="color")
    candidate = str(color).strip().upper()
    try:
        return TaskColor(candidate)
    except ValueError:
        raise TaskValidationError(
            f"Color must be one of: {', '.join(TaskColor.names())}",
            field="color",
        )


def parse_boolean(value: Any) -> bool | None:
    """Coerce a wire boolean. None means "not supplied".

    Accepts real booleans, the integers 0 and 1, and the strings
    true/false, 1/0, yes/no, on/off (case-insensitive, trimmed).
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if not text:
            return None
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    raise TaskValidationError("completed must be a boolean.", field="completed")
