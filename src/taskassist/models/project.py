"""Project domain models built with SQLModel."""

from __future__ import annotations

import sqlalchemy as sa
from sqlmodel import Field, SQLModel

from .common import TimestampMixin


class ProjectBase(SQLModel, table=False):
    """Shared attributes for project models."""

    name: str = Field(
        max_length=255,
        sa_column=sa.Column(sa.String(length=255), nullable=False),
    )
    color: str = Field(
        max_length=32,
        sa_column=sa.Column(sa.String(length=32), nullable=False),
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
    is_public: bool = Field(
        default=False,
        sa_column=sa.Column(sa.Boolean(), nullable=False, server_default=sa.false()),
    )


class Project(ProjectBase, TimestampMixin, table=True):
    """Persistent project model."""

    __tablename__ = "projects"
    __table_args__ = (
        sa.Index("ix_projects_user_id", "user_id"),
        sa.Index("ix_projects_team_id", "team_id"),
    )

    id: int | None = Field(default=None, primary_key=True)


__all__ = ["Project", "ProjectBase"]
