"""
FastAPI dependency functions.

Each ``get_*_service`` wires the request's database session into a
repository and wraps it in the matching service.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from store_api.core.database import get_db
from store_api.models.order_product_supplier import OrderProductSupplier
from store_api.models.product import Product
from store_api.models.product_supplier import ProductSupplier
from store_api.models.supplier import Supplier
from store_api.repositories.catalog import (
    OrderProductSupplierRepository,
    ProductRepository,
    ProductSupplierRepository,
    SupplierRepository,
)
from store_api.repositories.contact import ContactRepository
from store_api.repositories.customer import CustomerRepository
from store_api.repositories.order import OrderRepository
from store_api.services.base import EntityService
from store_api.services.contact import ContactService
from store_api.services.customer import CustomerService
from store_api.services.order import OrderService


DatabaseSession = Annotated[AsyncSession, Depends(get_db)]


def get_customer_service(db: DatabaseSession) -> CustomerService:
    return CustomerService(CustomerRepository(db))


def get_order_service(db: DatabaseSession) -> OrderService:
    return OrderService(OrderRepository(db))


def get_contact_service(db: DatabaseSession) -> ContactService:
    return ContactService(ContactRepository(db))


def get_product_service(db: DatabaseSession) -> EntityService[Product]:
    return EntityService(ProductRepository(db))


def get_supplier_service(db: DatabaseSession) -> EntityService[Supplier]:
    return EntityService(SupplierRepository(db))


def get_product_supplier_service(db: DatabaseSession) -> EntityService[ProductSupplier]:
    return EntityService(ProductSupplierRepository(db))


def get_order_product_supplier_service(
    db: DatabaseSession,
) -> EntityService[OrderProductSupplier]:
    return EntityService(OrderProductSupplierRepository(db))


CustomerServiceDep = Annotated[CustomerService, Depends(get_customer_service)]
OrderServiceDep = Annotated[OrderService, Depends(get_order_service)]
ContactServiceDep = Annotated[ContactService, Depends(get_contact_service)]
