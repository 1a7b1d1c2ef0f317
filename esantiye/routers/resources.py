from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, status

from esantiye.core.db import Database, get_database
from esantiye.core.errors import ApiError, DatabaseError
from esantiye.resources import RESOURCES, ResourceSpec
from esantiye.schemas.responses import CreatedResponse, ErrorResponse, ListResponse
from esantiye.services.resource_service import create_row, list_rows

DatabaseDep = Annotated[Database, Depends(get_database)]
# Any JSON is accepted; a body that is not an object has no mandatory field
# and answers 400 rather than FastAPI's 422.
PayloadBody = Annotated[Any, Body()]


def build_router(spec: ResourceSpec) -> APIRouter:
    router = APIRouter(
        prefix=f"/{spec.key}",
        tags=[spec.key],
        responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
    )

    @router.get("", response_model=ListResponse, name=f"list_{spec.key}")
    def list_resource(db: DatabaseDep) -> ListResponse:
        return ListResponse(data=list_rows(db, spec))

    if not spec.creatable:
        return router

    @router.post(
        "",
        response_model=CreatedResponse,
        response_model_exclude_none=True,
        responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
        name=f"create_{spec.key}",
    )
    def create_resource(db: DatabaseDep, payload: PayloadBody = None) -> CreatedResponse:
        fields = payload if isinstance(payload, dict) else {}
        try:
            new_id = create_row(db, spec, fields)
        except DatabaseError as err:
            raise ApiError(err.message, status.HTTP_400_BAD_REQUEST) from err
        return CreatedResponse(id=new_id, message=spec.created_message)

    return router


routers: list[APIRouter] = [build_router(spec) for spec in RESOURCES]
