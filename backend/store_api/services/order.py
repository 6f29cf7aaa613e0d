"""
Order service.
"""

from store_api.models.order import Order
from store_api.repositories.order import OrderRepository
from store_api.services.base import EntityService


class OrderService(EntityService[Order]):
    repository: OrderRepository

    async def get_order_with_order_products(self, order_id: int) -> Order:
        return await self.repository.get_order_with_order_products(order_id)
