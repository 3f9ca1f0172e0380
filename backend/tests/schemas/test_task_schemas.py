"""Task Schemas: structural parsing of request bodies and camelCase responses.

Invariants:
    - Request schemas leave field rules to the service (missing title parses as None)
    - TaskUpdate.supplied_fields() reports only keys actually sent
    - completed keeps its wire type for parse_boolean
"""

from datetime import datetime, timezone
from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from task_tracker.schemas.task import (
    TaskCompletion, TaskCreate, TaskResponse, TaskUpdate,
)


def test_create_parses_missing_fields_as_none():
    body = TaskCreate.model_validate({})
    assert body.title is None
    assert body.color is None
    assert body.completed is None


def test_create_rejects_non_string_title():
    with pytest.raises(ValidationError):
        TaskCreate.model_validate({"title": ["a"], "color": "RED"})


@pytest.mark.parametrize("raw", [True, 1, "true"])
def test_completed_keeps_wire_value(raw):
    assert TaskCompletion.model_validate({"completed": raw}).completed == raw


def test_completed_string_not_coerced_to_bool():
    assert TaskCompletion.model_validate({"completed": "false"}).completed == "false"


def test_update_supplied_fields_only_includes_sent_keys():
    body = TaskUpdate.model_validate({"color": "red"})
    assert body.supplied_fields() == {"color": "red"}


def test_update_explicit_null_is_supplied():
    body = TaskUpdate.model_validate({"title": None})
    assert body.supplied_fields() == {"title": None}


def test_update_ignores_unknown_keys():
    assert TaskUpdate.model_validate({"id": "x"}).supplied_fields() == {}


def test_response_reads_attributes_and_dumps_camel_case():
    now = datetime(2026, 1, 1, tzinfo=timezone.utc)
    row = SimpleNamespace(
        id="t1", title="Write docs", color="PINK", completed=True,
        created_at=now, updated_at=now,
    )
    dumped = TaskResponse.model_validate(row).model_dump(by_alias=True, mode="json")
    assert dumped == {
        "id": "t1",
        "title": "Write docs",
        "color": "PINK",
        "completed": True,
        "createdAt": "2026-01-01T00:00:00Z",
        "updatedAt": "2026-01-01T00:00:00Z",
    }
