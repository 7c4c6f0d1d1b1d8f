"""Routes for pairing users as teammates."""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from ...deps import CurrentUserDependency, DatabaseSessionDependency
from ...errors import NotFoundError
from ...schemas import TeamMemberCreate, TeamRead, UserPublic
from ...services import TeamService

router = APIRouter(prefix="/team-members", tags=["team"])


@router.get(
    "",
    response_model=list[UserPublic],
    summary="List the authenticated user's teammates",
)
async def list_my_team_members(
    session: DatabaseSessionDependency,
    current_user: CurrentUserDependency,
) -> list[UserPublic]:
    members = await TeamService(session).list_team_members(current_user.id)  # type: ignore[arg-type]
    return [UserPublic.model_validate(member) for member in members]


@router.get(
    "/{user_id}",
    response_model=list[UserPublic],
    summary="List a user's teammates",
)
async def list_team_members(
    user_id: int,
    session: DatabaseSessionDependency,
    current_user: CurrentUserDependency,
) -> list[UserPublic]:
    members = await TeamService(session).list_team_members(user_id)
    return [UserPublic.model_validate(member) for member in members]


@router.post(
    "",
    response_model=TeamRead,
    status_code=status.HTTP_201_CREATED,
    summary="Pair two users as teammates",
)
async def add_team_member(
    payload: TeamMemberCreate,
    session: DatabaseSessionDependency,
    current_user: CurrentUserDependency,
) -> TeamRead:
    team = await TeamService(session).add_team_member(payload.user_id1, payload.user_id2)
    return TeamRead.model_validate(team)


@router.delete(
    "/{team_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove a teammate relationship",
)
async def remove_team_member(
    team_id: int,
    session: DatabaseSessionDependency,
    current_user: CurrentUserDependency,
) -> Response:
    if not await TeamService(session).remove_team_member(team_id):
        raise NotFoundError("Team relationship not found.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
