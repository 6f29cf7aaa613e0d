"""
Generic entity service.

Sits between the HTTP layer and a repository: delegates each operation,
commits after writes (rolling back if the storage layer fails) and logs
what was written. There is no retry; failures surface to the caller
immediately.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Generic, Iterable, List

from sqlalchemy.exc import SQLAlchemyError

from store_api.core.logging_config import get_logger, log_with_context
from store_api.repositories.base import ModelT, Repository


logger = get_logger(__name__)


class EntityService(Generic[ModelT]):
    """
    Service exposing the generic data-access contract for one entity.

    Attributes:
        repository: Repository the operations are delegated to
    """

    def __init__(self, repository: Repository[ModelT]):
        self.repository = repository

    @property
    def entity_name(self) -> str:
        return self.repository.entity_name

    @asynccontextmanager
    async def _unit_of_work(self) -> AsyncIterator[None]:
        """
        Commit when the block succeeds; roll back on a storage failure.

        NotFoundError needs no rollback (nothing was written) and passes
        straight through.
        """
        session = self.repository.session
        try:
            yield
            await session.commit()
        except SQLAlchemyError:
            await session.rollback()
            raise

    async def create(self, record: ModelT) -> ModelT:
        async with self._unit_of_work():
            created = await self.repository.create(record)

        log_with_context(
            logger, "info", f"{self.entity_name} created",
            entity=self.entity_name, entity_id=created.id,
        )
        return created

    async def get_by_id(self, record_id: int) -> ModelT:
        return await self.repository.get_by_id(record_id)

    async def get_all(self) -> List[ModelT]:
        return await self.repository.get_all()

    async def update(self, record: ModelT) -> ModelT:
        async with self._unit_of_work():
            updated = await self.repository.update(record)

        log_with_context(
            logger, "info", f"{self.entity_name} updated",
            entity=self.entity_name, entity_id=updated.id,
        )
        return updated

    async def delete(self, record_id: int) -> int:
        """
        Soft-delete one record; returns 0 when nothing matched.
        """
        async with self._unit_of_work():
            count = await self.repository.delete(record_id)

        log_with_context(
            logger, "info", f"{self.entity_name} deleted",
            entity=self.entity_name, entity_id=record_id, count=count,
        )
        return count

    async def delete_all(self, record_ids: Iterable[int]) -> int:
        """
        Soft-delete several records at once; returns how many matched.
        """
        ids = list(record_ids)
        async with self._unit_of_work():
            count = await self.repository.delete_all(ids)

        log_with_context(
            logger, "info", f"{self.entity_name} records deleted",
            entity=self.entity_name, count=count, requested=len(ids),
        )
        return count
