from __future__ import annotations

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_project_crud_flow(client: AsyncClient, user_factory, auth_headers) -> None:
    owner = await user_factory("owner")
    headers = auth_headers(owner)

    create_response = await client.post(
        "/api/projects",
        json={"name": "Work", "color": "#3B82F6"},
        headers=headers,
    )
    assert create_response.status_code == 201
    project = create_response.json()
    assert project["userId"] == owner.id
    assert project["isPublic"] is False
    assert project["teamId"] is None

    get_response = await client.get(f"/api/projects/{project['id']}", headers=headers)
    assert get_response.status_code == 200
    assert get_response.json()["name"] == "Work"

    patch_response = await client.patch(
        f"/api/projects/{project['id']}",
        json={"isPublic": True},
        headers=headers,
    )
    assert patch_response.status_code == 200
    patched = patch_response.json()
    assert patched["isPublic"] is True
    assert patched["name"] == "Work"
    assert patched["color"] == "#3B82F6"

    list_response = await client.get("/api/projects", headers=headers)
    assert [item["id"] for item in list_response.json()] == [project["id"]]

    owned_response = await client.get(f"/api/projects/user/{owner.id}", headers=headers)
    assert [item["id"] for item in owned_response.json()] == [project["id"]]

    delete_response = await client.delete(f"/api/projects/{project['id']}", headers=headers)
    assert delete_response.status_code == 204
    assert delete_response.content == b""

    missing_response = await client.get(f"/api/projects/{project['id']}", headers=headers)
    assert missing_response.status_code == 404
    assert missing_response.json()["code"] == "not_found"


@pytest.mark.asyncio
async def test_missing_project_operations_return_404(
    client: AsyncClient,
    user_factory,
    auth_headers,
) -> None:
    headers = auth_headers(await user_factory("owner"))

    patch_response = await client.patch("/api/projects/999", json={"name": "x"}, headers=headers)
    delete_response = await client.delete("/api/projects/999", headers=headers)

    assert patch_response.status_code == 404
    assert delete_response.status_code == 404


@pytest.mark.asyncio
async def test_create_project_for_explicit_owner(
    client: AsyncClient,
    user_factory,
    auth_headers,
) -> None:
    caller = await user_factory("caller")
    other = await user_factory("other")

    response = await client.post(
        "/api/projects",
        json={"name": "Shopping", "color": "#F59E0B", "userId": other.id},
        headers=auth_headers(caller),
    )

    assert response.status_code == 201
    assert response.json()["userId"] == other.id


@pytest.mark.asyncio
async def test_accessible_projects_endpoint(
    client: AsyncClient,
    user_factory,
    auth_headers,
) -> None:
    alice = await user_factory("alice")
    bob = await user_factory("bob")
    alice_headers = auth_headers(alice)
    bob_headers = auth_headers(bob)

    team_response = await client.post(
        "/api/team-members",
        json={"userId1": alice.id, "userId2": bob.id},
        headers=alice_headers,
    )
    team_id = team_response.json()["id"]

    own = await client.post(
        "/api/projects",
        json={"name": "Mine", "color": "#000000"},
        headers=alice_headers,
    )
    public = await client.post(
        "/api/projects",
        json={"name": "Shared", "color": "#111111", "teamId": team_id, "isPublic": True},
        headers=bob_headers,
    )
    await client.post(
        "/api/projects",
        json={"name": "Private", "color": "#222222", "teamId": team_id},
        headers=bob_headers,
    )

    response = await client.get(f"/api/projects/accessible/{alice.id}", headers=alice_headers)

    assert response.status_code == 200
    assert [item["id"] for item in response.json()] == [own.json()["id"], public.json()["id"]]


@pytest.mark.asyncio
async def test_projects_require_authentication(client: AsyncClient) -> None:
    response = await client.get("/api/projects")

    assert response.status_code == 401
