"""Schemas for teammate relationships."""

from __future__ import annotations

from datetime import datetime

from .common import CamelModel


class TeamMemberCreate(CamelModel):
    """Pair two users as teammates."""

    user_id1: int
    user_id2: int


class TeamRead(CamelModel):
    """Public representation of a relationship row."""

    id: int
    user_id1: int
    user_id2: int
    created_at: datetime


__all__ = ["TeamMemberCreate", "TeamRead"]
