"""
Order repository.
"""

from sqlalchemy.orm import joinedload

from store_api.core.exceptions import NotFoundError
from store_api.models.order import Order
from store_api.models.order_product_supplier import OrderProductSupplier
from store_api.repositories.base import Repository


class OrderRepository(Repository[Order]):
    """
    Repository for order data access.
    """

    model = Order

    async def get_order_with_order_products(self, order_id: int) -> Order:
        """
        Retrieve an order with its active order lines loaded, in one
        joined statement.

        Raises:
            NotFoundError: If no active order has this id
        """
        stmt = (
            self._active()
            .where(Order.id == order_id)
            .options(
                joinedload(
                    Order.order_products.and_(OrderProductSupplier.deleted_at.is_(None))
                )
            )
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        order = result.unique().scalar_one_or_none()
        if order is None:
            raise NotFoundError(self.entity_name, order_id)
        return order
