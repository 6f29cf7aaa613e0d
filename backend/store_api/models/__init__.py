"""
SQLAlchemy ORM models for the store.

Import models from this module to ensure they're registered with SQLAlchemy.
"""

from store_api.models.base import (
    Base,
    SCHEMA_NAME,
    IntegerIDMixin,
    TimestampMixin,
    SoftDeleteMixin,
    ModelMixin,
    StoreModel,
    utc_now,
    IdentifierType,
)
from store_api.models.customer import Customer
from store_api.models.order import Order
from store_api.models.contact import Contact
from store_api.models.product import Product
from store_api.models.supplier import Supplier
from store_api.models.product_supplier import ProductSupplier
from store_api.models.order_product_supplier import OrderProductSupplier

__all__ = [
    # Base classes
    "Base",
    "SCHEMA_NAME",
    "IntegerIDMixin",
    "TimestampMixin",
    "SoftDeleteMixin",
    "ModelMixin",
    "StoreModel",
    "utc_now",
    "IdentifierType",
    # Models
    "Customer",
    "Order",
    "Contact",
    "Product",
    "Supplier",
    "ProductSupplier",
    "OrderProductSupplier",
]
