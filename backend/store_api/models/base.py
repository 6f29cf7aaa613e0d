"""
Base models and mixins for SQLAlchemy ORM.

Every store table lives in the ``sales`` schema namespace. The name is a
placeholder that the engine translates at execution time (see
``store_api.core.database``), so the same metadata works on PostgreSQL with
any configured schema and on SQLite, which has no schemas at all.
"""

from datetime import datetime, timezone
from typing import Any, List

from sqlalchemy import BigInteger, Column, DateTime, Integer, MetaData
from sqlalchemy.orm import declarative_base


SCHEMA_NAME = "sales"

# Columns managed by the store itself; callers never write them.
MANAGED_COLUMNS = frozenset({"id", "created_at", "updated_at", "deleted_at"})

# 64-bit ids and foreign keys. SQLite keeps INTEGER so the primary key stays
# a rowid alias and autoincrements.
IdentifierType = BigInteger().with_variant(Integer, "sqlite")


# SQLAlchemy declarative base for all ORM models
Base = declarative_base(metadata=MetaData(schema=SCHEMA_NAME))


def utc_now() -> datetime:
    """
    Current UTC time as a naive datetime.

    Naive values round-trip unchanged through both SQLite and PostgreSQL
    ``timestamp without time zone`` columns.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


class IntegerIDMixin:
    """
    Mixin that adds a store-generated surrogate integer primary key.
    """

    id = Column(
        IdentifierType,
        primary_key=True,
        autoincrement=True,
        doc="Surrogate primary key"
    )


class TimestampMixin:
    """
    Mixin that adds created_at and updated_at timestamp columns.

    Attributes:
        created_at: Timestamp when record was created (immutable)
        updated_at: Timestamp when record was last updated (auto-updated)
    """

    created_at = Column(
        DateTime,
        nullable=False,
        default=utc_now,
        doc="UTC timestamp when record was created"
    )

    updated_at = Column(
        DateTime,
        nullable=False,
        default=utc_now,
        onupdate=utc_now,
        doc="UTC timestamp when record was last updated"
    )


class SoftDeleteMixin:
    """
    Mixin that adds a deleted_at marker.

    A row with a non-null deleted_at is treated as absent by every read in
    the repository layer, but it is never physically removed.
    """

    deleted_at = Column(
        DateTime,
        nullable=True,
        index=True,
        doc="UTC timestamp when record was soft-deleted (NULL while active)"
    )

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None


class ModelMixin:
    """
    Mixin providing common model utilities.
    """

    @classmethod
    def mutable_column_names(cls) -> List[str]:
        """
        Names of the columns a caller owns.

        These are the columns copied by a whole-record update; the primary
        key and the lifecycle timestamps are excluded.
        """
        return [
            column.key
            for column in cls.__table__.columns
            if column.key not in MANAGED_COLUMNS
        ]

    def to_dict(self) -> dict[str, Any]:
        """
        Convert model instance to dictionary.

        Only includes columns, not relationships.
        """
        return {
            column.key: getattr(self, column.key)
            for column in self.__table__.columns
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={getattr(self, 'id', None)!r})"


class StoreModel(IntegerIDMixin, TimestampMixin, SoftDeleteMixin, ModelMixin):
    """
    Bundle of the mixins shared by every store entity.
    """
    pass
