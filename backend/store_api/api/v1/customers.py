"""
Customer endpoints.

Besides the shared CRUD routes, a customer can be fetched together with
its orders or with its contact.
"""

from store_api.api.dependencies import CustomerServiceDep, get_customer_service
from store_api.api.v1.crud import build_crud_router
from store_api.models.customer import Customer
from store_api.schemas.customer import (
    CustomerCreate,
    CustomerRead,
    CustomerUpdate,
    CustomerWithContact,
    CustomerWithOrders,
)
from store_api.utils.identifiers import string_to_uint


router = build_crud_router(
    path="/customers",
    model=Customer,
    service_dependency=get_customer_service,
    create_schema=CustomerCreate,
    update_schema=CustomerUpdate,
    read_schema=CustomerRead,
    singular="Customer",
    plural="customers",
)


@router.get(
    "/{record_id}/orders",
    response_model=CustomerWithOrders,
    summary="Get customer with orders",
)
async def get_customer_with_orders(
    record_id: str,
    service: CustomerServiceDep,
) -> Customer:
    """
    Customer plus its active orders (an empty list when it has none).
    """
    return await service.get_customer_with_orders(string_to_uint(record_id))


@router.get(
    "/{record_id}/contact",
    response_model=CustomerWithContact,
    summary="Get customer with contact",
)
async def get_customer_with_contact(
    record_id: str,
    service: CustomerServiceDep,
) -> Customer:
    """
    Customer plus its active contact (null when it has none).
    """
    return await service.get_customer_with_contact(string_to_uint(record_id))
