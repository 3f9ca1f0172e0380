"""Task Repository: SQLAlchemy implementation of the TaskRepository protocol.

Invariants:
    - One ORM statement per operation, committed before returning
    - update() and delete() use RETURNING; zero matched rows surface as NoResultFound
    - No validation here: callers pass already-normalized values
"""

from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from task_tracker.core.domain_types import TaskColor, TaskId
from task_tracker.models.task import Task


class SqlAlchemyTaskRepository:
    """Task persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def find_all_ordered(self) -> list[Task]:
        result = await self._db.execute(
            select(Task).order_by(Task.created_at.desc()),
        )
        return list(result.scalars().all())

    async def find_by_id(self, task_id: TaskId) -> Task | None:
        result = await self._db.execute(
            select(Task).where(Task.id == task_id),
        )
        return result.scalar_one_or_none()

    async def insert(
        self, title: str, color: TaskColor, completed: bool,
    ) -> Task:
        task = Task(title=title, color=color.value, completed=completed)
        self._db.add(task)
        await self._db.commit()
        await self._db.refresh(task)
        return task

    async def update(self, task_id: TaskId, fields: dict[str, Any]) -> Task:
        """Partial update. Raises NoResultFound if the id matches no row."""
        result = await self._db.execute(
            update(Task)
            .where(Task.id == task_id)
            .values(**fields)
            .returning(Task)
            .execution_options(populate_existing=True),
        )
        task = result.scalar_one()
        await self._db.commit()
        return task

    async def delete(self, task_id: TaskId) -> None:
        """Raises NoResultFound if the id matches no row."""
        result = await self._db.execute(
            delete(Task).where(Task.id == task_id).returning(Task.id),
        )
        result.scalar_one()
        await self._db.commit()
