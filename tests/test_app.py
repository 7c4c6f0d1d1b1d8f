from __future__ import annotations

import pytest
from httpx import AsyncClient

from taskassist import __version__


@pytest.mark.asyncio
async def test_root_and_health(client: AsyncClient) -> None:
    root = await client.get("/")
    assert root.status_code == 200
    assert root.json() == {
        "name": "TaskAssist",
        "environment": "test",
        "version": __version__,
        "api_prefix": "/api",
    }

    health = await client.get("/healthz")
    assert health.status_code == 200
    assert health.json() == {"status": "ok", "database": "ok"}


@pytest.mark.asyncio
async def test_openapi_lists_task_routes(client: AsyncClient) -> None:
    response = await client.get("/api/openapi.json")

    assert response.status_code == 200
    paths = response.json()["paths"]
    for path in (
        "/api/tasks",
        "/api/tasks/summary",
        "/api/tasks/assigned/{user_id}",
        "/api/projects/accessible/{user_id}",
        "/api/team-members/{team_id}",
        "/api/auth/register",
    ):
        assert path in paths
