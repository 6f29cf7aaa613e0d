"""
Contact service.
"""

from typing import List

from store_api.models.contact import Contact
from store_api.repositories.contact import ContactRepository
from store_api.services.base import EntityService


class ContactService(EntityService[Contact]):
    repository: ContactRepository

    async def get_all_by_customer_id(self, customer_id: int) -> List[Contact]:
        return await self.repository.get_all_by_customer_id(customer_id)

    async def get_all_by_supplier_id(self, supplier_id: int) -> List[Contact]:
        return await self.repository.get_all_by_supplier_id(supplier_id)
