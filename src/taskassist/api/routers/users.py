"""Routes for user lookup and profile maintenance."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Query

from ...deps import CurrentUserDependency, DatabaseSessionDependency, SettingsDependency
from ...schemas import UserProfileUpdate, UserPublic
from ...services import UserService

router = APIRouter(prefix="/users", tags=["users"])

SearchQuery = Annotated[
    str,
    Query(
        alias="q",
        description="Case-insensitive fragment of a username, email or name.",
    ),
]


@router.get(
    "/search",
    response_model=list[UserPublic],
    summary="Search users by username, email or name",
)
async def search_users(
    q: SearchQuery,
    session: DatabaseSessionDependency,
    settings: SettingsDependency,
    current_user: CurrentUserDependency,
) -> list[UserPublic]:
    service = UserService(session)
    users = await service.search_users(q, limit=settings.user_search_limit)
    return [UserPublic.model_validate(user) for user in users]


@router.patch(
    "/me",
    response_model=UserPublic,
    summary="Update the authenticated user's profile",
)
async def update_profile(
    payload: UserProfileUpdate,
    session: DatabaseSessionDependency,
    current_user: CurrentUserDependency,
) -> UserPublic:
    service = UserService(session)
    user = await service.update_profile(
        current_user.id,  # type: ignore[arg-type]
        **payload.model_dump(exclude_unset=True),
    )
    return UserPublic.model_validate(user)
