"""Schemas describing authentication payloads."""

from __future__ import annotations

from pydantic import ConfigDict, EmailStr, Field

from .common import CamelModel
from .user import UserPublic


class RegisterRequest(CamelModel):
    """Incoming payload for registering a new user."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "john",
                "password": "password123",
                "email": "john@example.com",
                "firstName": "John",
                "lastName": "Doe",
            }
        }
    )

    username: str = Field(min_length=3, max_length=50)
    password: str = Field(min_length=6)
    email: EmailStr | None = None
    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)


class LoginRequest(CamelModel):
    """Credentials submitted to obtain a bearer token."""

    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class AuthResponse(CamelModel):
    """Authentication response containing the issued token and user metadata."""

    user: UserPublic
    token: str
    token_type: str = Field(default="bearer", frozen=True)
    expires_in: int


__all__ = ["AuthResponse", "LoginRequest", "RegisterRequest"]
