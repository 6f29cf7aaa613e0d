"""
Generic repository implementing the create / read / update / soft-delete
contract shared by every store entity.

Entity repositories subclass ``Repository`` and set ``model``; only the
relationship-aware reads live in the subclasses.
"""

from typing import Any, ClassVar, Generic, Iterable, List, Optional, Type, TypeVar

from sqlalchemy import Select, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from store_api.core.exceptions import NotFoundError
from store_api.models.base import StoreModel, utc_now


ModelT = TypeVar("ModelT", bound=StoreModel)


class Repository(Generic[ModelT]):
    """
    Async data access for one entity type.

    Every read excludes soft-deleted rows. Writes are flushed but never
    committed; the caller owns the transaction.

    Attributes:
        model: Mapped class handled by this repository (set by subclasses)
        session: SQLAlchemy async session for database operations
    """

    model: ClassVar[Type[StoreModel]]

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @property
    def entity_name(self) -> str:
        return self.model.__name__

    def _active(self) -> Select:
        """SELECT of the non-deleted rows of ``model``."""
        return select(self.model).where(self.model.deleted_at.is_(None))

    async def create(self, record: ModelT) -> ModelT:
        """
        Insert one record.

        The id and the timestamps are assigned by the store; any id already
        on ``record`` is discarded.

        Args:
            record: Transient model instance carrying the caller's fields

        Returns:
            The same instance, now persistent, with generated fields loaded

        Raises:
            IntegrityError: If a constraint (NOT NULL, foreign key, unique
                active contact) is violated
        """
        record.id = None
        self.session.add(record)
        await self.session.flush()

        # Refresh to get all generated fields (id, timestamps)
        await self.session.refresh(record)

        return record

    async def find_by_id(self, record_id: int) -> Optional[ModelT]:
        """
        Retrieve an active record by id.

        Returns:
            The record, or None if it does not exist or was soft-deleted
        """
        stmt = self._active().where(self.model.id == record_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_id(self, record_id: int) -> ModelT:
        """
        Retrieve an active record by id.

        Raises:
            NotFoundError: If no active row has this id
        """
        record = await self.find_by_id(record_id)
        if record is None:
            raise NotFoundError(self.entity_name, record_id)
        return record

    async def get_all(self) -> List[ModelT]:
        """
        Retrieve every active record, ordered by id.

        Returns:
            List of records (empty when the table has no active rows)
        """
        stmt = self._active().order_by(self.model.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def update(self, record: ModelT) -> ModelT:
        """
        Overwrite every caller-owned column of an existing record.

        This is a whole-record replacement, not a patch: a None on
        ``record`` is written as NULL, except for NOT NULL columns with a
        default, which get that default as on create. It never inserts.

        The write is a single ``UPDATE ... WHERE id = :id AND deleted_at IS
        NULL``, so a row soft-deleted by a concurrent caller is never
        overwritten.

        Args:
            record: Instance carrying the target id and the full new state

        Returns:
            The persistent record after the update

        Raises:
            NotFoundError: If no active row has ``record.id``
            IntegrityError: If the new state violates a constraint
        """
        values = {
            name: self._value_or_default(name, getattr(record, name))
            for name in self.model.mutable_column_names()
        }
        stmt = (
            update(self.model)
            .where(self.model.id == record.id, self.model.deleted_at.is_(None))
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        if result.rowcount == 0:
            raise NotFoundError(self.entity_name, record.id)

        stmt = (
            self._active()
            .where(self.model.id == record.id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    def _value_or_default(self, name: str, value: Any) -> Any:
        """Scalar default of a NOT NULL column when ``value`` is None."""
        column = self.model.__table__.columns[name]
        default = column.default
        if value is None and not column.nullable and default is not None and default.is_scalar:
            return default.arg
        return value

    async def delete(self, record_id: int) -> int:
        """
        Soft-delete one record.

        Deleting an id that does not exist, or is already deleted, is a
        no-op.

        Returns:
            Number of rows marked deleted (0 or 1)
        """
        return await self.delete_all([record_id])

    async def delete_all(self, record_ids: Iterable[int]) -> int:
        """
        Soft-delete every active record whose id is in ``record_ids``.

        Runs as a single UPDATE statement, so either every matching row is
        marked or none is.

        Returns:
            Number of rows marked deleted
        """
        ids = sorted(set(record_ids))
        if not ids:
            return 0

        stmt = (
            update(self.model)
            .where(self.model.id.in_(ids), self.model.deleted_at.is_(None))
            .values(deleted_at=utc_now())
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount
