"""
Supplier endpoints.
"""

from store_api.api.dependencies import get_supplier_service
from store_api.api.v1.crud import build_crud_router
from store_api.models.supplier import Supplier
from store_api.schemas.catalog import SupplierCreate, SupplierRead, SupplierUpdate


router = build_crud_router(
    path="/suppliers",
    model=Supplier,
    service_dependency=get_supplier_service,
    create_schema=SupplierCreate,
    update_schema=SupplierUpdate,
    read_schema=SupplierRead,
    singular="Supplier",
    plural="suppliers",
)
