"""Router registrations for the TaskAssist API."""

from __future__ import annotations

from fastapi import APIRouter

from .auth import router as auth_router
from .projects import router as projects_router
from .tasks import router as tasks_router
from .team_members import router as team_members_router
from .users import router as users_router

api_router = APIRouter()
api_router.include_router(auth_router)
api_router.include_router(users_router)
api_router.include_router(projects_router)
api_router.include_router(tasks_router)
api_router.include_router(team_members_router)

__all__ = [
    "api_router",
    "auth_router",
    "projects_router",
    "tasks_router",
    "team_members_router",
    "users_router",
]
