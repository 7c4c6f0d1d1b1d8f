"""Response bodies for the service-level endpoints and the error envelope."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class RootResponse(BaseModel):
    """Service identity returned by ``GET /``."""

    name: str = Field(description="Configured project name")
    environment: str = Field(description="Active settings profile")
    version: str = Field(description="Package version")
    api_prefix: str = Field(description="Path under which the TaskAssist routes are mounted")


class HealthCheckResponse(BaseModel):
    status: str = Field(default="ok", description="Always ``ok`` when the process answers")
    database: str = Field(default="ok", description="``ok`` once a ``SELECT 1`` round trip succeeded")


class ErrorResponse(BaseModel):
    """Body of every non-2xx response.

    ``errors`` is only present for request validation failures and maps the
    camelCase field name to its message. ``details`` carries the request id.
    """

    code: str = Field(description="Stable error code such as ``not_found`` or ``conflict``")
    message: str
    errors: dict[str, str] | None = None
    details: Any | None = None
