"""
Repository layer for data access.

One repository per entity, all built on the generic ``Repository``.
"""

from store_api.repositories.base import Repository
from store_api.repositories.customer import CustomerRepository
from store_api.repositories.order import OrderRepository
from store_api.repositories.contact import ContactRepository
from store_api.repositories.catalog import (
    ProductRepository,
    SupplierRepository,
    ProductSupplierRepository,
    OrderProductSupplierRepository,
)

__all__ = [
    "Repository",
    "CustomerRepository",
    "OrderRepository",
    "ContactRepository",
    "ProductRepository",
    "SupplierRepository",
    "ProductSupplierRepository",
    "OrderProductSupplierRepository",
]
