"""Task Routes: thin HTTP layer over services/task_service.py.

Invariants:
    - Every success body is {"data": ...}; failures raise TaskTrackerError
      and are rendered as {"error": message} by api/error_handlers.py
    - One AsyncSession per request, wrapped in SqlAlchemyTaskRepository
    - Routes never touch the ORM directly
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from task_tracker.api.request_body import parsed_body
from task_tracker.core.errors import TaskNotFoundError
from task_tracker.core.validators import validate_task_id
from task_tracker.infrastructure.database import get_db
from task_tracker.infrastructure.task_repository import SqlAlchemyTaskRepository
from task_tracker.schemas.task import (
    MessageEnvelope, TaskCompletion, TaskCreate, TaskEnvelope,
    TaskListEnvelope, TaskResponse, TaskUpdate,
)
from task_tracker.services import task_service
from task_tracker.services.task_service import CreateTaskInput

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/tasks", tags=["tasks"])


def get_task_repository(
    db: AsyncSession = Depends(get_db),
) -> SqlAlchemyTaskRepository:
    return SqlAlchemyTaskRepository(db)


def _envelope(task) -> dict:
    return {"data": TaskResponse.model_validate(task)}


def _body_docs(schema, required: bool = True) -> dict:
    """OpenAPI request body for routes that parse the body themselves."""
    return {
        "requestBody": {
            "required": required,
            "content": {
                media_type: {"schema": schema.model_json_schema()}
                for media_type in (
                    "application/json", "application/x-www-form-urlencoded",
                )
            },
        },
    }


@router.get("", response_model=TaskListEnvelope)
async def list_tasks(
    repo: SqlAlchemyTaskRepository = Depends(get_task_repository),
):
    """List all tasks, most recent first."""
    tasks = await task_service.list_tasks(repo)
    return {"data": [TaskResponse.model_validate(t) for t in tasks]}


@router.get("/{task_id}", response_model=TaskEnvelope)
async def get_task(
    task_id: str,
    repo: SqlAlchemyTaskRepository = Depends(get_task_repository),
):
    task = await task_service.get_task(repo, task_id)
    if task is None:
        raise TaskNotFoundError(validate_task_id(task_id))
    return _envelope(task)


@router.post(
    "", response_model=TaskEnvelope, status_code=status.HTTP_201_CREATED,
    openapi_extra=_body_docs(TaskCreate),
)
async def create_task(
    body: TaskCreate = Depends(parsed_body(TaskCreate)),
    repo: SqlAlchemyTaskRepository = Depends(get_task_repository),
):
    """Create a task. Title is trimmed, color upper-cased."""
    task = await task_service.create_task(
        repo,
        CreateTaskInput(
            title=body.title, color=body.color, completed=body.completed,
        ),
    )
    return _envelope(task)


@router.put(
    "/{task_id}", response_model=TaskEnvelope,
    openapi_extra=_body_docs(TaskUpdate),
)
async def update_task(
    task_id: str,
    body: TaskUpdate = Depends(parsed_body(TaskUpdate)),
    repo: SqlAlchemyTaskRepository = Depends(get_task_repository),
):
    """Partial update: only the fields present in the body are written."""
    task = await task_service.update_task(repo, task_id, body.supplied_fields())
    return _envelope(task)


@router.patch(
    "/{task_id}/complete", response_model=TaskEnvelope,
    openapi_extra=_body_docs(TaskCompletion, required=False),
)
async def complete_task(
    task_id: str,
    body: TaskCompletion | None = Depends(
        parsed_body(TaskCompletion, required=False),
    ),
    repo: SqlAlchemyTaskRepository = Depends(get_task_repository),
):
    """Set completion from the body, or flip it when no value is sent."""
    completed = body.completed if body else None
    task = await task_service.toggle_task_completion(repo, task_id, completed)
    return _envelope(task)


@router.delete("/{task_id}", response_model=MessageEnvelope)
async def delete_task(
    task_id: str,
    repo: SqlAlchemyTaskRepository = Depends(get_task_repository),
):
    await task_service.delete_task(repo, task_id)
    return {"data": {"message": "Task deleted successfully"}}
