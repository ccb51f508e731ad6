"""
API Schemas for Todos app.
Ninja schemas for request/response validation.
"""
from datetime import datetime
from ninja import Schema
from pydantic import ConfigDict, Field, field_serializer

from .dtos import Task


# =============================================================================
# Request Schemas
# =============================================================================

class TaskIn(Schema):
    """Schema for creating a task. Emptiness is checked by the store."""
    title: str


# =============================================================================
# Response Schemas
# =============================================================================

class TaskOut(Schema):
    """Task as seen by the browser client (camelCase timestamps)."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    done: bool
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    @field_serializer("created_at", "updated_at")
    def serialize_timestamp(self, value: datetime) -> str:
        # DjangoJSONEncoder would cut to milliseconds and hide sub-ms updates
        return value.isoformat()

    @classmethod
    def from_task(cls, task: Task) -> "TaskOut":
        return cls(
            id=task.id,
            title=task.title,
            done=task.done,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )


class ErrorOut(Schema):
    error: str


class HealthOut(Schema):
    status: str
