"""
Customer service.
"""

from store_api.models.customer import Customer
from store_api.repositories.customer import CustomerRepository
from store_api.services.base import EntityService


class CustomerService(EntityService[Customer]):
    repository: CustomerRepository

    async def get_customer_with_orders(self, customer_id: int) -> Customer:
        return await self.repository.get_customer_with_orders(customer_id)

    async def get_customer_with_contact(self, customer_id: int) -> Customer:
        return await self.repository.get_customer_with_contact(customer_id)
