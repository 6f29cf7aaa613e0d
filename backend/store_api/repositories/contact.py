"""
Contact repository, with reads filtered by owner.
"""

from typing import List

from store_api.models.contact import Contact
from store_api.repositories.base import Repository


class ContactRepository(Repository[Contact]):
    """
    Repository for contact data access.
    """

    model = Contact

    async def get_all_by_customer_id(self, customer_id: int) -> List[Contact]:
        """
        Active contacts whose customer_id matches (zero or more).
        """
        stmt = (
            self._active()
            .where(Contact.customer_id == customer_id)
            .order_by(Contact.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_all_by_supplier_id(self, supplier_id: int) -> List[Contact]:
        """
        Active contacts whose supplier_id matches (zero or more).
        """
        stmt = (
            self._active()
            .where(Contact.supplier_id == supplier_id)
            .order_by(Contact.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
