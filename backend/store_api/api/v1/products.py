"""
Product endpoints.
"""

from store_api.api.dependencies import get_product_service
from store_api.api.v1.crud import build_crud_router
from store_api.models.product import Product
from store_api.schemas.catalog import ProductCreate, ProductRead, ProductUpdate


router = build_crud_router(
    path="/products",
    model=Product,
    service_dependency=get_product_service,
    create_schema=ProductCreate,
    update_schema=ProductUpdate,
    read_schema=ProductRead,
    singular="Product",
    plural="products",
)
