"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Store operations accessed through Protocol types
    - update() and delete() raise the ORM's NoResultFound when no row matched

Design Decisions:
    - Protocol over ABC: structural subtyping, services accept any fake with
      the same shape in tests
"""

from datetime import datetime
from typing import Any, Protocol

from task_tracker.core.domain_types import TaskColor, TaskId


class TaskLike(Protocol):
    """Structural contract for Task objects returned by the repository."""
    id: str
    title: str
    color: str
    completed: bool
    created_at: datetime
    updated_at: datetime


class TaskRepository(Protocol):
    """Contract for task persistence: implemented by infrastructure."""
    async def find_all_ordered(self) -> list[TaskLike]: ...
    async def find_by_id(self, task_id: TaskId) -> TaskLike | None: ...
    async def insert(
        self, title: str, color: TaskColor, completed: bool,
    ) -> TaskLike: ...
    async def update(
        self, task_id: TaskId, fields: dict[str, Any],
    ) -> TaskLike: ...
    async def delete(self, task_id: TaskId) -> None: ...
