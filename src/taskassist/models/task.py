"""Task domain models built with SQLModel."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

import sqlalchemy as sa
from sqlmodel import Field, SQLModel

from .common import TimestampMixin

DEFAULT_PRIORITY = "medium"


class TaskFilter(str, Enum):
    """Named task selections accepted by list endpoints."""

    COMPLETED = "completed"
    PENDING = "pending"
    STARRED = "starred"

    @classmethod
    def parse(cls, value: "TaskFilter | str | None") -> "TaskFilter | None":
        """Return the matching filter, or ``None`` for absent and unrecognised values."""
        if value is None or isinstance(value, cls):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class TaskBase(SQLModel, table=False):
    """Shared attributes for task models."""

    title: str = Field(
        max_length=255,
        sa_column=sa.Column(sa.String(length=255), nullable=False),
    )
    description: str | None = Field(
        default=None,
        sa_column=sa.Column(sa.Text(), nullable=True),
    )
    completed: bool = Field(
        default=False,
        sa_column=sa.Column(sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    starred: bool = Field(
        default=False,
        sa_column=sa.Column(sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    priority: str = Field(
        default=DEFAULT_PRIORITY,
        max_length=20,
        sa_column=sa.Column(
            sa.String(length=20),
            nullable=False,
            server_default=DEFAULT_PRIORITY,
        ),
    )
    project_id: int | None = Field(
        default=None,
        sa_column=sa.Column(
            sa.Integer(),
            sa.ForeignKey("projects.id", ondelete="SET NULL"),
            nullable=True,
        ),
    )
    due_date: datetime | None = Field(
        default=None,
        sa_column=sa.Column(sa.DateTime(timezone=True), nullable=True),
    )
    assigned_to: int | None = Field(
        default=None,
        sa_column=sa.Column(
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="SET NULL"),
            nullable=True,
        ),
    )
    assigned_by: int | None = Field(
        default=None,
        sa_column=sa.Column(
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="SET NULL"),
            nullable=True,
        ),
    )
    user_id: int = Field(
        sa_column=sa.Column(
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
    )
    team_id: int | None = Field(
        default=None,
        sa_column=sa.Column(
            sa.Integer(),
            sa.ForeignKey("teams.id", ondelete="SET NULL"),
            nullable=True,
        ),
    )


class Task(TaskBase, TimestampMixin, table=True):
    """Persistent task model."""

    __tablename__ = "tasks"
    __table_args__ = (
        sa.CheckConstraint("length(title) > 0", name="ck_tasks_title_length"),
        sa.Index("ix_tasks_user_id", "user_id"),
        sa.Index("ix_tasks_assigned_to", "assigned_to"),
        sa.Index("ix_tasks_assigned_by", "assigned_by"),
    )

    id: int | None = Field(default=None, primary_key=True)


__all__ = ["DEFAULT_PRIORITY", "Task", "TaskBase", "TaskFilter"]
