"""User-facing Pydantic schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import EmailStr, Field

from ..models import UserRole
from .common import CamelModel


class UserPublic(CamelModel):
    """Public representation of a user; the password hash is never included."""

    id: int
    username: str
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    role: UserRole
    profile_image_url: str | None = None
    is_active: bool
    last_login: datetime | None = None
    created_at: datetime
    updated_at: datetime


class UserProfileUpdate(CamelModel):
    """Partial update of the caller's profile."""

    email: EmailStr | None = None
    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    profile_image_url: str | None = None


__all__ = ["UserProfileUpdate", "UserPublic"]
