"""Generic async repository with explicit optimistic-concurrency save results."""

from __future__ import annotations

import enum
import logging
from typing import Any, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from vendor_api.db.base import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class SaveResult(enum.Enum):
    """Outcome of persisting changes to an existing row."""

    SAVED = "saved"
    CONFLICT = "conflict"  # row still exists, its version moved on
    MISSING = "missing"  # row was deleted concurrently


class BaseRepository(Generic[ModelT]):
    """Generic CRUD repository over one mapped model.

    Reads never lazy-load: callers that need related rows use the
    entity-specific ``*_with_*`` queries which eager-load them.
    """

    model: type[ModelT]

    def __init__(self, session: AsyncSession):
        self._session = session

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def get_by_id(self, entity_id: Any) -> ModelT | None:
        return await self._session.get(self.model, entity_id)

    async def exists(self, entity_id: Any) -> bool:
        q = select(func.count()).select_from(self.model).where(self.model.id == entity_id)
        return (await self._session.execute(q)).scalar_one() > 0

    async def count(self) -> int:
        return (await self._session.execute(select(func.count()).select_from(self.model))).scalar_one()

    async def list(self) -> list[ModelT]:
        result = await self._session.execute(select(self.model).order_by(self.model.id))
        return list(result.scalars().all())

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def add(self, instance: ModelT) -> ModelT:
        self._session.add(instance)
        await self._session.flush()  # populate id
        return instance

    async def save(self, entity_id: Any) -> SaveResult:
        """Commit pending changes to ``entity_id``'s row.

        A version mismatch is reported as CONFLICT when the row is still
        there and MISSING when it is gone; nothing is retried.
        """
        try:
            await self._session.commit()
        except StaleDataError:
            await self._session.rollback()
            if await self.exists(entity_id):
                logger.warning("%s %s: concurrent modification", self.model.__name__, entity_id)
                return SaveResult.CONFLICT
            logger.info("%s %s vanished during update", self.model.__name__, entity_id)
            return SaveResult.MISSING
        return SaveResult.SAVED

    async def delete(self, instance: ModelT) -> None:
        await self._session.delete(instance)
        await self._session.flush()

    async def commit(self) -> None:
        await self._session.commit()
