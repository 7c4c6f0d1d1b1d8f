"""Task-related Pydantic schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import ConfigDict, Field

from .common import CamelModel

TASK_READ_EXAMPLE = {
    "id": 1,
    "title": "Ship v1",
    "description": "Cut the release branch and publish notes.",
    "completed": False,
    "starred": True,
    "priority": "high",
    "projectId": 2,
    "dueDate": "2024-02-01T17:00:00Z",
    "assignedTo": 3,
    "assignedBy": 2,
    "userId": 2,
    "teamId": None,
    "createdAt": "2024-01-01T12:00:00Z",
    "updatedAt": "2024-01-02T08:30:00Z",
}


class TaskCreate(CamelModel):
    """Payload for creating a new task."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Ship v1",
                "priority": "high",
                "projectId": 2,
                "assignedTo": 3,
            }
        }
    )

    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    completed: bool | None = None
    starred: bool | None = None
    priority: str | None = Field(default=None, min_length=1, max_length=20)
    project_id: int | None = None
    due_date: datetime | None = None
    assigned_to: int | None = None
    assigned_by: int | None = None
    user_id: int | None = None
    team_id: int | None = None


class TaskUpdate(CamelModel):
    """Payload for partially updating an existing task.

    Omitted and ``null`` fields both leave the stored value untouched.
    """

    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    completed: bool | None = None
    project_id: int | None = None
    due_date: datetime | None = None
    priority: str | None = Field(default=None, min_length=1, max_length=20)
    starred: bool | None = None
    assigned_to: int | None = None
    assigned_by: int | None = None
    team_id: int | None = None


class TaskRead(CamelModel):
    """Public representation of a task."""

    model_config = ConfigDict(json_schema_extra={"example": TASK_READ_EXAMPLE})

    id: int
    title: str
    description: str | None = None
    completed: bool
    starred: bool
    priority: str
    project_id: int | None = None
    due_date: datetime | None = None
    assigned_to: int | None = None
    assigned_by: int | None = None
    user_id: int
    team_id: int | None = None
    created_at: datetime
    updated_at: datetime


class TaskSummary(CamelModel):
    """Aggregate task counts."""

    total: int
    completed: int
    pending: int


__all__ = ["TaskCreate", "TaskRead", "TaskSummary", "TaskUpdate"]
