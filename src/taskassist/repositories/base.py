"""Generic persistence helpers over an ``AsyncSession``."""

from __future__ import annotations

from typing import Generic, TypeVar

from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..errors import NotFoundError

ModelType = TypeVar("ModelType", bound=SQLModel)


class BaseRepository(Generic[ModelType]):
    """Primary-key lookups, id-ordered listing, insert and delete for one table.

    Repositories only flush; committing is left to the calling service so that
    each service operation commits once.
    """

    #: Name used in not-found messages, e.g. ``"Task 3 not found."``.
    label = "Resource"

    def __init__(self, session: AsyncSession, model_type: type[ModelType]) -> None:
        self._session = session
        self._model_type = model_type

    async def get(self, entity_id: int) -> ModelType | None:
        return await self._session.get(self._model_type, entity_id)

    async def require(self, entity_id: int) -> ModelType:
        """Return the row with ``entity_id`` or raise ``NotFoundError``."""
        instance = await self.get(entity_id)
        if instance is None:
            raise NotFoundError(f"{self.label} {entity_id} not found.")
        return instance

    async def list(self) -> list[ModelType]:
        query = select(self._model_type).order_by(self._model_type.id)  # type: ignore[attr-defined]
        result = await self._session.execute(query)
        return list(result.scalars().all())

    async def add(self, instance: ModelType) -> ModelType:
        self._session.add(instance)
        await self._session.flush()
        return instance

    async def delete_by_id(self, entity_id: int) -> bool:
        """Delete the row with ``entity_id``; ``False`` when there was none."""
        instance = await self.get(entity_id)
        if instance is None:
            return False
        await self._session.delete(instance)
        await self._session.flush()
        return True

    async def refresh(self, instance: ModelType) -> ModelType:
        await self._session.refresh(instance)
        return instance
