"""Seed script for populating development data."""

from __future__ import annotations

import asyncio
import logging
from datetime import timedelta

from ..core.config import get_settings
from ..core.logging import configure_logging
from ..models import User, UserRole, utcnow
from ..services import ProjectService, TaskService, TeamService, UserService
from .session import async_session_maker, init_db

logger = logging.getLogger(__name__)

SEED_PASSWORD = "password123"

SEED_USERS: tuple[dict[str, object], ...] = (
    {
        "username": "admin",
        "email": "admin@example.com",
        "first_name": "Admin",
        "last_name": "User",
        "role": UserRole.ADMIN,
    },
    {"username": "john", "email": "john@example.com", "first_name": "John", "last_name": "Doe"},
    {"username": "sarah", "email": "sarah@example.com", "first_name": "Sarah", "last_name": "Smith"},
)

SEED_TEAMS: tuple[tuple[str, str], ...] = (("admin", "john"), ("admin", "sarah"), ("john", "sarah"))

# owner, name, color, shared with (a pair from SEED_TEAMS), public
SEED_PROJECTS: tuple[tuple[str, str, str, tuple[str, str] | None, bool], ...] = (
    ("admin", "Personal", "#10B981", None, False),
    ("admin", "Work", "#3B82F6", ("admin", "john"), True),
    ("john", "Shopping", "#F59E0B", None, False),
    ("john", "Marketing", "#EC4899", ("admin", "john"), True),
    ("sarah", "Research", "#8B5CF6", ("john", "sarah"), True),
)


async def _ensure_user(service: UserService, profile: dict[str, object]) -> User:
    username = str(profile["username"])
    user = await service.get_user_by_username(username)
    if user is None:
        user = await service.create_user(password=SEED_PASSWORD, **profile)  # type: ignore[arg-type]
    if user.id is None:  # pragma: no cover - defensive guard
        raise ValueError("Seed user was not persisted correctly")
    return user


async def seed() -> None:
    """Populate the database with a small set of development fixtures."""
    async with async_session_maker() as session:
        user_service = UserService(session)
        project_service = ProjectService(session)
        task_service = TaskService(session)
        team_service = TeamService(session)

        users: dict[str, User] = {}
        for profile in SEED_USERS:
            user = await _ensure_user(user_service, profile)
            users[user.username] = user
        admin, john, sarah = users["admin"], users["john"], users["sarah"]

        teams = {
            pair: await team_service.add_team_member(users[pair[0]].id, users[pair[1]].id)  # type: ignore[arg-type]
            for pair in SEED_TEAMS
        }
        admin_john = teams[("admin", "john")]

        if await project_service.list_projects():
            logger.info("Seed data already present")
            return

        projects = {}
        for owner, name, color, shared_with, is_public in SEED_PROJECTS:
            projects[name] = await project_service.create_project(
                user_id=users[owner].id,  # type: ignore[arg-type]
                name=name,
                color=color,
                team_id=teams[shared_with].id if shared_with else None,
                is_public=is_public,
            )

        now = utcnow()
        await task_service.create_task(
            user_id=admin.id,  # type: ignore[arg-type]
            title="Review quarterly goals",
            description="Collect the numbers before the planning meeting.",
            priority="high",
            starred=True,
            project_id=projects["Work"].id,
            due_date=now + timedelta(days=3),
        )
        await task_service.create_task(
            user_id=admin.id,  # type: ignore[arg-type]
            title="Prepare campaign brief",
            project_id=projects["Marketing"].id,
            assigned_to=john.id,
            assigned_by=admin.id,
            team_id=admin_john.id,
            due_date=now + timedelta(days=7),
        )
        await task_service.create_task(
            user_id=john.id,  # type: ignore[arg-type]
            title="Buy groceries",
            project_id=projects["Shopping"].id,
            priority="low",
            completed=True,
        )
        await task_service.create_task(
            user_id=sarah.id,  # type: ignore[arg-type]
            title="Summarise user interviews",
            project_id=projects["Research"].id,
            assigned_to=sarah.id,
            assigned_by=john.id,
        )
        await task_service.create_task(
            user_id=admin.id,  # type: ignore[arg-type]
            title="Renew gym membership",
            project_id=projects["Personal"].id,
        )
        logger.info("Seed data created", extra={"users": len(users), "projects": len(projects)})


async def _run() -> None:
    await init_db()
    await seed()


def main() -> None:
    """Entry-point hook for ``taskassist-seed`` and ``python -m`` execution."""
    configure_logging(get_settings())
    asyncio.run(_run())


if __name__ == "__main__":  # pragma: no cover - manual execution entry-point
    main()
