"""Pydantic schemas for public interfaces."""

from __future__ import annotations

from .auth import AuthResponse, LoginRequest, RegisterRequest
from .common import CamelModel
from .project import ProjectCreate, ProjectRead, ProjectUpdate
from .system import ErrorResponse, HealthCheckResponse, RootResponse
from .task import TaskCreate, TaskRead, TaskSummary, TaskUpdate
from .team import TeamMemberCreate, TeamRead
from .user import UserProfileUpdate, UserPublic

__all__ = [
    "AuthResponse",
    "CamelModel",
    "ErrorResponse",
    "HealthCheckResponse",
    "LoginRequest",
    "ProjectCreate",
    "ProjectRead",
    "ProjectUpdate",
    "RegisterRequest",
    "RootResponse",
    "TaskCreate",
    "TaskRead",
    "TaskSummary",
    "TaskUpdate",
    "TeamMemberCreate",
    "TeamRead",
    "UserProfileUpdate",
    "UserPublic",
]
