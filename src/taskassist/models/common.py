"""Timestamp helpers shared by the table models."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import sqlalchemy as sa
from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    """Return a timezone-aware UTC timestamp."""
    return datetime.now(timezone.utc)


def timestamp_field() -> Any:
    """Non-null timezone-aware column filled on insert by both Python and the database."""
    return Field(
        default_factory=utcnow,
        nullable=False,
        sa_type=sa.DateTime(timezone=True),
        sa_column_kwargs={"server_default": sa.func.now()},
    )


class TimestampMixin(SQLModel, table=False):
    """``created_at``/``updated_at`` columns for mutable rows."""

    created_at: datetime = timestamp_field()
    updated_at: datetime = timestamp_field()

    def touch(self) -> None:
        """Mark the row as modified now."""
        self.updated_at = utcnow()


__all__ = ["TimestampMixin", "timestamp_field", "utcnow"]
