"""
Customer repository, with the eager reads that pull a customer's orders or
contact along with it.
"""

from sqlalchemy.orm import joinedload

from store_api.core.exceptions import NotFoundError
from store_api.models.contact import Contact
from store_api.models.customer import Customer
from store_api.models.order import Order
from store_api.repositories.base import Repository


class CustomerRepository(Repository[Customer]):
    """
    Repository for customer data access.
    """

    model = Customer

    async def get_customer_with_orders(self, customer_id: int) -> Customer:
        """
        Retrieve a customer with its active orders loaded.

        Parent and children come back from one LEFT OUTER JOIN statement,
        so the result is a single point-in-time view: an order written
        concurrently is either fully in the collection or absent.

        Returns:
            Customer whose ``orders`` collection is populated (possibly empty)

        Raises:
            NotFoundError: If no active customer has this id
        """
        stmt = (
            self._active()
            .where(Customer.id == customer_id)
            .options(joinedload(Customer.orders.and_(Order.deleted_at.is_(None))))
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        customer = result.unique().scalar_one_or_none()
        if customer is None:
            raise NotFoundError(self.entity_name, customer_id)
        return customer

    async def get_customer_with_contact(self, customer_id: int) -> Customer:
        """
        Retrieve a customer with its active contact loaded.

        Returns:
            Customer whose ``contact`` is the active Contact, or None

        Raises:
            NotFoundError: If no active customer has this id
        """
        stmt = (
            self._active()
            .where(Customer.id == customer_id)
            .options(joinedload(Customer.contact.and_(Contact.deleted_at.is_(None))))
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        customer = result.unique().scalar_one_or_none()
        if customer is None:
            raise NotFoundError(self.entity_name, customer_id)
        return customer
