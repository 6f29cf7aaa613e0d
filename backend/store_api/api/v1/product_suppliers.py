"""
Endpoints for the product/supplier offers (what a supplier sells a
product for).
"""

from store_api.api.dependencies import get_product_supplier_service
from store_api.api.v1.crud import build_crud_router
from store_api.models.product_supplier import ProductSupplier
from store_api.schemas.catalog import (
    ProductSupplierCreate,
    ProductSupplierRead,
    ProductSupplierUpdate,
)


router = build_crud_router(
    path="/product-suppliers",
    model=ProductSupplier,
    service_dependency=get_product_supplier_service,
    create_schema=ProductSupplierCreate,
    update_schema=ProductSupplierUpdate,
    read_schema=ProductSupplierRead,
    singular="Product supplier",
    plural="product suppliers",
)
