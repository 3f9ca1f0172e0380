"""Task Service: validate-then-delegate operations against a real SQLite store.

Invariants:
    - create trims titles, upper-cases colors, defaults completed to False
    - update/delete of a missing id raise TaskNotFoundError (translated NoResultFound)
    - toggle flips when no value is given and sets exactly otherwise
    - list is newest first
"""

import pytest

from task_tracker.core.errors import TaskNotFoundError, TaskValidationError
from task_tracker.services import task_service
from task_tracker.services.task_service import CreateTaskInput


async def _create(repo, title="Buy milk", color="blue", completed=None):
    return await task_service.create_task(
        repo, CreateTaskInput(title=title, color=color, completed=completed),
    )


# --- create -------------------------------------------------------------------

async def test_create_trims_title_and_normalizes_color(repo):
    task = await _create(repo, title="  Buy milk  ", color=" blue ")
    assert task.title == "Buy milk"
    assert task.color == "BLUE"
    assert task.completed is False
    assert task.id


async def test_create_assigns_distinct_ids(repo):
    a = await _create(repo)
    b = await _create(repo)
    assert a.id != b.id


async def test_create_accepts_string_completed(repo):
    task = await _create(repo, completed="true")
    assert task.completed is True


async def test_create_with_blank_title_fails(repo):
    with pytest.raises(TaskValidationError, match="Title is required"):
        await _create(repo, title="   ")
    assert await task_service.list_tasks(repo) == []


async def test_create_with_unknown_color_fails(repo):
    with pytest.raises(TaskValidationError, match="Color must be one of"):
        await _create(repo, color="teal")


# --- get / list ---------------------------------------------------------------

async def test_get_returns_none_for_missing_id(repo):
    assert await task_service.get_task(repo, "does-not-exist") is None


async def test_get_rejects_empty_id(repo):
    with pytest.raises(TaskValidationError):
        await task_service.get_task(repo, "")


async def test_list_is_newest_first(make_task, repo):
    await make_task(title="oldest", age_minutes=30)
    await make_task(title="newest", age_minutes=0)
    await make_task(title="middle", age_minutes=10)

    tasks = await task_service.list_tasks(repo)
    assert [t.title for t in tasks] == ["newest", "middle", "oldest"]


# --- update -------------------------------------------------------------------

async def test_update_writes_only_supplied_fields(repo):
    task = await _create(repo, title="Old", color="red")
    updated = await task_service.update_task(repo, task.id, {"title": "  New "})
    assert updated.title == "New"
    assert updated.color == "RED"
    assert updated.completed is False


async def test_update_normalizes_color(repo):
    task = await _create(repo)
    updated = await task_service.update_task(repo, task.id, {"color": "green"})
    assert updated.color == "GREEN"


async def test_update_missing_id_is_not_found(repo):
    with pytest.raises(TaskNotFoundError) as exc:
        await task_service.update_task(repo, "missing-id", {"title": "x"})
    assert exc.value.task_id == "missing-id"


async def test_update_without_fields_is_rejected(repo):
    task = await _create(repo)
    with pytest.raises(TaskValidationError, match="No fields provided"):
        await task_service.update_task(repo, task.id, {})


async def test_update_with_only_unknown_fields_is_rejected(repo):
    task = await _create(repo)
    with pytest.raises(TaskValidationError, match="No fields provided"):
        await task_service.update_task(repo, task.id, {"id": "other"})


async def test_update_rejects_null_completed(repo):
    task = await _create(repo)
    with pytest.raises(TaskValidationError, match="completed must be a boolean"):
        await task_service.update_task(repo, task.id, {"completed": None})


async def test_update_validation_runs_before_lookup(repo):
    with pytest.raises(TaskValidationError):
        await task_service.update_task(repo, "missing-id", {"color": "teal"})


# --- toggle -------------------------------------------------------------------

async def test_toggle_without_value_flips(repo):
    task = await _create(repo)
    flipped = await task_service.toggle_task_completion(repo, task.id)
    assert flipped.completed is True
    flipped_back = await task_service.toggle_task_completion(repo, task.id)
    assert flipped_back.completed is False


@pytest.mark.parametrize("value", [True, "true", 1])
async def test_toggle_with_true_sets_exactly(repo, value):
    task = await _create(repo, completed=True)
    result = await task_service.toggle_task_completion(repo, task.id, value)
    assert result.completed is True


async def test_toggle_with_false_sets_exactly(repo):
    task = await _create(repo)
    result = await task_service.toggle_task_completion(repo, task.id, False)
    assert result.completed is False


async def test_toggle_missing_id_is_not_found(repo):
    with pytest.raises(TaskNotFoundError):
        await task_service.toggle_task_completion(repo, "missing-id")


async def test_toggle_explicit_value_missing_id_is_not_found(repo):
    with pytest.raises(TaskNotFoundError):
        await task_service.toggle_task_completion(repo, "missing-id", True)


# --- delete -------------------------------------------------------------------

async def test_delete_then_get_returns_none(repo):
    task = await _create(repo)
    await task_service.delete_task(repo, task.id)
    assert await task_service.get_task(repo, task.id) is None


async def test_delete_missing_id_is_not_found(repo):
    with pytest.raises(TaskNotFoundError):
        await task_service.delete_task(repo, "missing-id")
