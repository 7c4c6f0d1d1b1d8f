"""Teammate relationship model built with SQLModel."""

from __future__ import annotations

from datetime import datetime

import sqlalchemy as sa
from sqlmodel import Field, SQLModel

from .common import timestamp_field


class Team(SQLModel, table=True):
    """Symmetric pairing of two users.

    ``user_id1``/``user_id2`` keep the order supplied by the caller, while
    ``member_low_id``/``member_high_id`` hold the canonical ``(min, max)`` pair
    so that the unique constraint covers both orderings.
    """

    __tablename__ = "teams"
    __table_args__ = (
        sa.UniqueConstraint("member_low_id", "member_high_id", name="uq_teams_member_pair"),
        sa.CheckConstraint("user_id1 <> user_id2", name="ck_teams_distinct_members"),
        sa.Index("ix_teams_user_id1", "user_id1"),
        sa.Index("ix_teams_user_id2", "user_id2"),
    )

    id: int | None = Field(default=None, primary_key=True)
    user_id1: int = Field(
        sa_column=sa.Column(
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
    )
    user_id2: int = Field(
        sa_column=sa.Column(
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
    )
    member_low_id: int = Field(sa_column=sa.Column(sa.Integer(), nullable=False))
    member_high_id: int = Field(sa_column=sa.Column(sa.Integer(), nullable=False))
    created_at: datetime = timestamp_field()

    @classmethod
    def for_pair(cls, user_id1: int, user_id2: int) -> "Team":
        """Build a relationship row for the two users, canonicalising the pair."""
        return cls(
            user_id1=user_id1,
            user_id2=user_id2,
            member_low_id=min(user_id1, user_id2),
            member_high_id=max(user_id1, user_id2),
        )


__all__ = ["Team"]
