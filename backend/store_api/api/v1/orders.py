"""
Order endpoints.
"""

from store_api.api.dependencies import OrderServiceDep, get_order_service
from store_api.api.v1.crud import build_crud_router
from store_api.models.order import Order
from store_api.schemas.order import (
    OrderCreate,
    OrderRead,
    OrderUpdate,
    OrderWithOrderProducts,
)
from store_api.utils.identifiers import string_to_uint


router = build_crud_router(
    path="/orders",
    model=Order,
    service_dependency=get_order_service,
    create_schema=OrderCreate,
    update_schema=OrderUpdate,
    read_schema=OrderRead,
    singular="Order",
    plural="orders",
)


@router.get(
    "/{record_id}/order-products",
    response_model=OrderWithOrderProducts,
    summary="Get order with its lines",
)
async def get_order_with_order_products(
    record_id: str,
    service: OrderServiceDep,
) -> Order:
    return await service.get_order_with_order_products(string_to_uint(record_id))
