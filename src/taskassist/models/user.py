"""User domain models built with SQLModel."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

import sqlalchemy as sa
from sqlmodel import Field, SQLModel

from .common import TimestampMixin


class UserRole(str, Enum):
    """Roles supported by the authentication system."""

    USER = "user"
    ADMIN = "admin"


class UserBase(SQLModel, table=False):
    """Shared attributes for user models."""

    username: str = Field(
        max_length=50,
        sa_column=sa.Column(sa.String(length=50), nullable=False, unique=True),
    )
    email: str | None = Field(
        default=None,
        max_length=320,
        sa_column=sa.Column(sa.String(length=320), nullable=True),
    )
    first_name: str | None = Field(
        default=None,
        max_length=100,
        sa_column=sa.Column(sa.String(length=100), nullable=True),
    )
    last_name: str | None = Field(
        default=None,
        max_length=100,
        sa_column=sa.Column(sa.String(length=100), nullable=True),
    )
    role: UserRole = Field(
        default=UserRole.USER,
        sa_column=sa.Column(
            sa.Enum(UserRole, name="user_role", native_enum=False),
            nullable=False,
            server_default=UserRole.USER.value,
        ),
    )
    profile_image_url: str | None = Field(
        default=None,
        sa_column=sa.Column(sa.Text(), nullable=True),
    )
    is_active: bool = Field(
        default=True,
        sa_column=sa.Column(sa.Boolean(), nullable=False, server_default=sa.true()),
    )


class User(UserBase, TimestampMixin, table=True):
    """Persistent user model."""

    __tablename__ = "users"
    __table_args__ = (sa.Index("ix_users_email", "email"),)

    id: int | None = Field(default=None, primary_key=True)
    hashed_password: str = Field(
        max_length=255,
        sa_column=sa.Column(sa.String(length=255), nullable=False),
    )
    last_login: datetime | None = Field(
        default=None,
        sa_column=sa.Column(sa.DateTime(timezone=True), nullable=True),
    )


__all__ = ["User", "UserBase", "UserRole"]
