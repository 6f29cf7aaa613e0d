"""
Contact endpoints.

The listing accepts an optional owner filter:
``GET /contacts?customer_id=3`` or ``GET /contacts?supplier_id=7``.
"""

from typing import List, Optional

from fastapi import HTTPException, Query, status

from store_api.api.dependencies import ContactServiceDep, get_contact_service
from store_api.api.v1.crud import build_crud_router
from store_api.models.contact import Contact
from store_api.schemas.contact import ContactCreate, ContactRead, ContactUpdate
from store_api.utils.identifiers import string_to_uint


router = build_crud_router(
    path="/contacts",
    model=Contact,
    service_dependency=get_contact_service,
    create_schema=ContactCreate,
    update_schema=ContactUpdate,
    read_schema=ContactRead,
    singular="Contact",
    plural="contacts",
    include_list=False,
)


@router.get(
    "",
    response_model=List[ContactRead],
    summary="List contacts",
)
async def list_contacts(
    service: ContactServiceDep,
    customer_id: Optional[str] = Query(default=None),
    supplier_id: Optional[str] = Query(default=None),
) -> List[Contact]:
    """
    List active contacts, optionally only those of one owner.

    Raises:
        HTTPException: 400 if both owner filters are given
    """
    if customer_id is not None and supplier_id is not None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Filter by customer_id or supplier_id, not both"
        )

    if customer_id is not None:
        return await service.get_all_by_customer_id(string_to_uint(customer_id))
    if supplier_id is not None:
        return await service.get_all_by_supplier_id(string_to_uint(supplier_id))
    return await service.get_all()
