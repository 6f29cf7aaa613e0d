"""
Order line endpoints.
"""

from store_api.api.dependencies import get_order_product_supplier_service
from store_api.api.v1.crud import build_crud_router
from store_api.models.order_product_supplier import OrderProductSupplier
from store_api.schemas.order import (
    OrderProductSupplierCreate,
    OrderProductSupplierRead,
    OrderProductSupplierUpdate,
)


router = build_crud_router(
    path="/order-product-suppliers",
    model=OrderProductSupplier,
    service_dependency=get_order_product_supplier_service,
    create_schema=OrderProductSupplierCreate,
    update_schema=OrderProductSupplierUpdate,
    read_schema=OrderProductSupplierRead,
    singular="Order product supplier",
    plural="order product suppliers",
)
