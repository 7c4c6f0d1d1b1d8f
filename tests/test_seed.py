from __future__ import annotations

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from taskassist.db import seed as seed_module
from taskassist.services import ProjectService, TaskService, TeamService, UserService


@pytest.mark.asyncio
async def test_seed_is_idempotent(engine: AsyncEngine, monkeypatch) -> None:
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    monkeypatch.setattr(seed_module, "async_session_maker", session_factory)

    await seed_module.seed()
    await seed_module.seed()

    async with session_factory() as session:
        john = await UserService(session).get_user_by_username("john")
        assert john is not None
        assert await UserService(session).verify_credentials("john", seed_module.SEED_PASSWORD)

        projects = await ProjectService(session).list_projects()
        assert [project.name for project in projects] == [
            "Personal",
            "Work",
            "Shopping",
            "Marketing",
            "Research",
        ]
        assert len(await TeamService(session).repository.list()) == 3
        assert len(await TaskService(session).list_tasks()) == 5

        accessible = await ProjectService(session).list_accessible_projects(john.id)
        assert {project.name for project in accessible} == {
            "Work",
            "Shopping",
            "Marketing",
            "Research",
        }
