"""Domain models exposed for the TaskAssist service."""

from __future__ import annotations

from .common import TimestampMixin, utcnow
from .project import Project, ProjectBase
from .task import DEFAULT_PRIORITY, Task, TaskBase, TaskFilter
from .team import Team
from .user import User, UserBase, UserRole

__all__ = [
    "DEFAULT_PRIORITY",
    "Project",
    "ProjectBase",
    "Task",
    "TaskBase",
    "TaskFilter",
    "Team",
    "TimestampMixin",
    "User",
    "UserBase",
    "UserRole",
    "utcnow",
]
