"""
Typed failures raised by the data layer.

Only "not found" gets its own type. Every other persistence failure is a
SQLAlchemy exception and travels to the caller untouched.
"""

from typing import Any


class StoreError(Exception):
    """Base exception for the store data layer"""
    pass


class NotFoundError(StoreError):
    """
    Raised when a read or an update targets a row that does not exist
    or has been soft-deleted.

    Attributes:
        entity: Human-readable entity name (e.g. "Customer")
        identifier: The identifier that was looked up
    """

    def __init__(self, entity: str, identifier: Any):
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} not found: {identifier}")
