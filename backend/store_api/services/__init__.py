"""
Service layer: one service per entity over its repository.
"""

from store_api.services.base import EntityService
from store_api.services.customer import CustomerService
from store_api.services.order import OrderService
from store_api.services.contact import ContactService

__all__ = [
    "EntityService",
    "CustomerService",
    "OrderService",
    "ContactService",
]
