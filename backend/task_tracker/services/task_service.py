"""Task Service: validate-then-delegate operations over a TaskRepository.

Invariants:
    - Every input is validated and normalized before the repository is called
    - The store's "record missing" error (NoResultFound) becomes TaskNotFoundError
    - Toggle goes through update_task on both paths (explicit value and flip)
    - Services never build HTTP responses; routes own the envelope
"""

import logging
from dataclasses import dataclass
from typing import Any

from sqlalchemy.exc import NoResultFound

from task_tracker.core.errors import TaskNotFoundError, TaskValidationError
from task_tracker.core.repository_protocols import TaskLike, TaskRepository
from task_tracker.core.validators import (
    normalize_color, parse_boolean, validate_task_id, validate_title,
)

logger = logging.getLogger(__name__)

_UPDATABLE_FIELDS = ("title", "color", "completed")


@dataclass
class CreateTaskInput:
    title: Any
    color: Any
    completed: Any = None


async def list_tasks(repo: TaskRepository) -> list[TaskLike]:
    """All tasks, most recent first."""
    return await repo.find_all_ordered()


async def get_task(repo: TaskRepository, task_id: Any) -> TaskLike | None:
    return await repo.find_by_id(validate_task_id(task_id))


async def create_task(repo: TaskRepository, data: CreateTaskInput) -> TaskLike:
    title = validate_title(data.title)
    color = normalize_color(data.color)
    completed = parse_boolean(data.completed)

    task = await repo.insert(
        title=title, color=color,
        completed=completed if completed is not None else False,
    )
    logger.info("Task created", extra={"task_id": task.id})
    return task


async def update_task(
    repo: TaskRepository, task_id: Any, data: dict[str, Any],
) -> TaskLike:
    """Partial update of title, color and/or completed.

    Only keys present in `data` are written. Unknown keys are ignored but an
    update carrying none of the updatable fields is rejected.
    """
    tid = validate_task_id(task_id)
    supplied = {k: v for k, v in (data or {}).items() if k in _UPDATABLE_FIELDS}
    if not supplied:
        raise TaskValidationError("No fields provided to update.")

    fields: dict[str, Any] = {}
    if "title" in supplied:
        fields["title"] = validate_title(supplied["title"])
    if "color" in supplied:
        fields["color"] = normalize_color(supplied["color"]).value
    if "completed" in supplied:
        completed = parse_boolean(supplied["completed"])
        if completed is None:
            raise TaskValidationError(
                "completed must be a boolean.", field="completed",
            )
        fields["completed"] = completed

    try:
        task = await repo.update(tid, fields)
    except NoResultFound:
        raise TaskNotFoundError(tid)
    logger.info(
        f"Task updated ({', '.join(sorted(fields))})",
        extra={"task_id": tid},
    )
    return task


async def toggle_task_completion(
    repo: TaskRepository, task_id: Any, completed: Any = None,
) -> TaskLike:
    """Set completion explicitly, or flip the stored flag when none is given."""
    tid = validate_task_id(task_id)
    target = parse_boolean(completed)

    if target is None:
        existing = await repo.find_by_id(tid)
        if existing is None:
            raise TaskNotFoundError(tid)
        target = not existing.completed

    return await update_task(repo, tid, {"completed": target})


async def delete_task(repo: TaskRepository, task_id: Any) -> None:
    tid = validate_task_id(task_id)
    try:
        await repo.delete(tid)
    except NoResultFound:
        raise TaskNotFoundError(tid)
    logger.info("Task deleted", extra={"task_id": tid})
