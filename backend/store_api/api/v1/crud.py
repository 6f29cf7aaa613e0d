"""
Router factory for the create / read / update / delete endpoints every
resource shares.

Resource modules call ``build_crud_router`` and then add their own
relationship endpoints to the returned router.
"""

from typing import Any, Callable, List, Type

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel

from store_api.models.base import StoreModel
from store_api.schemas.common import MessageResponse
from store_api.services.base import EntityService
from store_api.utils.identifiers import string_to_uint, strings_to_uints


def build_crud_router(
    *,
    path: str,
    model: Type[StoreModel],
    service_dependency: Callable[..., EntityService],
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    read_schema: Type[BaseModel],
    singular: str,
    plural: str,
    include_list: bool = True,
) -> APIRouter:
    """
    Build a router exposing the generic contract for one resource.

    Args:
        path: Collection path, e.g. "/customers"
        model: Mapped class records are built from
        service_dependency: Dependency returning the resource's service
        create_schema: Request body for POST
        update_schema: Request body for PUT (full desired state)
        read_schema: Response model for a single record
        singular: Label used in messages ("Customer")
        plural: Label used in messages ("customers")
        include_list: Register ``GET <path>``; off when the resource
            provides its own (filtered) listing

    Routes:
        GET    <path>           list active records
        GET    <path>/{id}      one record (404 if missing)
        POST   <path>           create (201)
        PUT    <path>/{id}      overwrite (404 if missing)
        DELETE <path>/{id}      soft-delete one
        DELETE <path>?ids=1&ids=2  soft-delete many
    """
    router = APIRouter(prefix=path, tags=[plural])

    if include_list:
        @router.get(
            "",
            response_model=List[read_schema],
            summary=f"List {plural}",
        )
        async def list_records(
            service: EntityService = Depends(service_dependency),
        ) -> List[Any]:
            return await service.get_all()

    @router.get(
        "/{record_id}",
        response_model=read_schema,
        summary=f"Get {singular.lower()} by ID",
    )
    async def get_record(
        record_id: str,
        service: EntityService = Depends(service_dependency),
    ) -> Any:
        return await service.get_by_id(string_to_uint(record_id))

    @router.post(
        "",
        response_model=read_schema,
        status_code=status.HTTP_201_CREATED,
        summary=f"Create {singular.lower()}",
    )
    async def create_record(
        payload: create_schema,  # type: ignore[valid-type]
        service: EntityService = Depends(service_dependency),
    ) -> Any:
        return await service.create(model(**payload.model_dump()))

    @router.put(
        "/{record_id}",
        response_model=read_schema,
        summary=f"Replace {singular.lower()}",
        description="Whole-record overwrite: every field takes the submitted value.",
    )
    async def update_record(
        record_id: str,
        payload: update_schema,  # type: ignore[valid-type]
        service: EntityService = Depends(service_dependency),
    ) -> Any:
        record = model(**payload.model_dump())
        record.id = string_to_uint(record_id)
        return await service.update(record)

    @router.delete(
        "/{record_id}",
        response_model=MessageResponse,
        summary=f"Delete {singular.lower()}",
    )
    async def delete_record(
        record_id: str,
        service: EntityService = Depends(service_dependency),
    ) -> MessageResponse:
        await service.delete(string_to_uint(record_id))
        return MessageResponse(message=f"{singular} deleted successfully")

    @router.delete(
        "",
        response_model=MessageResponse,
        summary=f"Delete several {plural}",
    )
    async def delete_records(
        ids: List[str] = Query(default=[]),
        service: EntityService = Depends(service_dependency),
    ) -> MessageResponse:
        await service.delete_all(strings_to_uints(ids))
        return MessageResponse(message=f"All {plural} deleted successfully")

    return router
