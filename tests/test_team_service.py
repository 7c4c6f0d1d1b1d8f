from __future__ import annotations

import pytest
from sqlmodel.ext.asyncio.session import AsyncSession

from taskassist.errors import NotFoundError, ValidationFailedError
from taskassist.models import Team
from taskassist.services import TeamService


@pytest.mark.asyncio
async def test_add_team_member_is_symmetric(session: AsyncSession, user_factory) -> None:
    alice = await user_factory("alice")
    bob = await user_factory("bob")
    service = TeamService(session)

    first = await service.add_team_member(alice.id, bob.id)
    second = await service.add_team_member(bob.id, alice.id)

    assert first.id is not None
    assert second.id == first.id
    assert (first.user_id1, first.user_id2) == (alice.id, bob.id)
    assert await service.repository.list() == [first]

    assert [user.id for user in await service.list_team_members(alice.id)] == [bob.id]
    assert [user.id for user in await service.list_team_members(bob.id)] == [alice.id]


@pytest.mark.asyncio
async def test_team_members_cover_both_sides(session: AsyncSession, user_factory) -> None:
    alice = await user_factory("alice")
    bob = await user_factory("bob")
    carol = await user_factory("carol")
    service = TeamService(session)

    await service.add_team_member(alice.id, bob.id)
    await service.add_team_member(carol.id, alice.id)

    members = await service.list_team_members(alice.id)
    assert {user.username for user in members} == {"bob", "carol"}
    assert [team.id for team in await service.list_teams_for_user(alice.id)] == [1, 2]
    assert await service.list_team_members(9999) == []


@pytest.mark.asyncio
async def test_add_team_member_validates_input(session: AsyncSession, user_factory) -> None:
    alice = await user_factory("alice")
    service = TeamService(session)

    with pytest.raises(ValidationFailedError):
        await service.add_team_member(alice.id, alice.id)
    with pytest.raises(NotFoundError):
        await service.add_team_member(alice.id, 9999)


@pytest.mark.asyncio
async def test_remove_team_member_by_relationship_id(session: AsyncSession, user_factory) -> None:
    alice = await user_factory("alice")
    bob = await user_factory("bob")
    service = TeamService(session)
    team = await service.add_team_member(alice.id, bob.id)

    assert await service.remove_team_member(team.id) is True
    assert await service.remove_team_member(team.id) is False
    assert await service.get_team(team.id) is None
    assert await service.list_team_members(alice.id) == []


@pytest.mark.asyncio
async def test_for_pair_canonicalises_member_columns() -> None:
    team = Team.for_pair(7, 3)

    assert (team.user_id1, team.user_id2) == (7, 3)
    assert (team.member_low_id, team.member_high_id) == (3, 7)
