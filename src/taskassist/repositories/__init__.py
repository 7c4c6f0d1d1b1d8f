"""Database repositories for encapsulating persistence logic."""

from __future__ import annotations

from .projects import ProjectRepository
from .tasks import TaskRepository
from .teams import TeamRepository
from .users import UserRepository

__all__ = ["ProjectRepository", "TaskRepository", "TeamRepository", "UserRepository"]
