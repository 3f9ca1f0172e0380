"""Task Schemas: request bodies and response envelopes for /tasks.

Invariants:
    - Request fields are optional at the schema level so the service can
      report the domain message ("Title is required.") instead of a generic one
    - completed accepts bool, int or str on the wire; parse_boolean coerces it
    - TaskResponse dumps createdAt/updatedAt (camelCase) and reads ORM attributes
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

WireBoolean = bool | int | str | None


class TaskCreate(BaseModel):
    """POST /tasks body."""
    title: str | None = None
    color: str | None = None
    completed: WireBoolean = None


class TaskUpdate(BaseModel):
    """PUT /tasks/{id} body. Only fields actually sent are applied."""
    title: str | None = None
    color: str | None = None
    completed: WireBoolean = None

    def supplied_fields(self) -> dict:
        return self.model_dump(exclude_unset=True)


class TaskCompletion(BaseModel):
    """PATCH /tasks/{id}/complete body. Absent completed means toggle."""
    completed: WireBoolean = None


class TaskResponse(BaseModel):
    """Public task representation."""
    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True,
    )

    id: str
    title: str
    color: str
    completed: bool
    created_at: datetime
    updated_at: datetime


class TaskEnvelope(BaseModel):
    data: TaskResponse


class TaskListEnvelope(BaseModel):
    data: list[TaskResponse] = Field(default_factory=list)


class MessageData(BaseModel):
    message: str


class MessageEnvelope(BaseModel):
    data: MessageData
