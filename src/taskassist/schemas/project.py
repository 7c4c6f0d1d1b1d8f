"""Project-related Pydantic schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import ConfigDict, Field

from .common import CamelModel

PROJECT_READ_EXAMPLE = {
    "id": 1,
    "name": "Work",
    "color": "#3B82F6",
    "userId": 2,
    "teamId": None,
    "isPublic": False,
    "createdAt": "2024-01-01T12:00:00Z",
    "updatedAt": "2024-01-02T08:30:00Z",
}


class ProjectCreate(CamelModel):
    """Payload for creating a project; the owner defaults to the caller."""

    name: str = Field(min_length=1, max_length=255)
    color: str = Field(min_length=1, max_length=32)
    user_id: int | None = None
    team_id: int | None = None
    is_public: bool = False


class ProjectUpdate(CamelModel):
    """Payload for partially updating a project."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    color: str | None = Field(default=None, min_length=1, max_length=32)
    team_id: int | None = None
    is_public: bool | None = None


class ProjectRead(CamelModel):
    """Public representation of a project."""

    model_config = ConfigDict(json_schema_extra={"example": PROJECT_READ_EXAMPLE})

    id: int
    name: str
    color: str
    user_id: int
    team_id: int | None = None
    is_public: bool
    created_at: datetime
    updated_at: datetime


__all__ = ["ProjectCreate", "ProjectRead", "ProjectUpdate"]
