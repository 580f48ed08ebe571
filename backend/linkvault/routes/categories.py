"""
LinkVault Backend — Category Route Handlers
=============================================

What:  /api/categories list, create, reorder, update and delete.
How:   Thin handlers: gate writes, decode and validate the body, call
       CategoryService, shape the JSON response.

Route order:
    Starlette matches routes in registration order, so the literal paths
    (`/categories/reorder`, `/categories/`) are registered before the
    parametric `/categories/{category_id}`. "reorder" is therefore never
    parsed as an id.
"""

from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from linkvault.auth import require_password
from linkvault.database import get_db_session
from linkvault.exceptions import NotFoundError, ValidationError
from linkvault.routes.common import parse_body, parse_resource_id, storage_failure
from linkvault.schemas.category import CategoryPayload, CategoryResponse
from linkvault.schemas.common import ErrorResponse, MessageResponse, ReorderRequest
from linkvault.services.category_service import category_service

router = APIRouter(prefix="/api", tags=["Categories"])

_WRITE_RESPONSES = {
    400: {"description": "Invalid body or id", "model": ErrorResponse},
    401: {"description": "Wrong or missing password", "model": ErrorResponse},
    500: {"description": "Store failure", "model": ErrorResponse},
}


def category_id_param(category_id: str) -> int:
    """Path segment → integer id, or 400 "Invalid category ID"."""
    return parse_resource_id(category_id, "category")


async def read_category_payload(request: Request) -> CategoryPayload:
    payload = await parse_body(request, CategoryPayload)
    if not payload.name:
        raise ValidationError(message="Name is required", field="name")
    return payload


@router.get(
    "/categories",
    response_model=List[CategoryResponse],
    summary="List categories in display order",
)
async def list_categories(
    db: AsyncSession = Depends(get_db_session),
) -> List[CategoryResponse]:
    with storage_failure("Failed to get categories"):
        categories = await category_service.list_categories(db)
    return [CategoryResponse.model_validate(c) for c in categories]


@router.post(
    "/categories",
    status_code=201,
    response_model=CategoryResponse,
    responses=_WRITE_RESPONSES,
    summary="Create a category at the end of the list",
)
async def create_category(
    request: Request,
    _: None = Depends(require_password),
    db: AsyncSession = Depends(get_db_session),
) -> CategoryResponse:
    payload = await read_category_payload(request)
    with storage_failure("Failed to create category"):
        category = await category_service.create_category(db, payload.name)
    return CategoryResponse.model_validate(category)


@router.post(
    "/categories/reorder",
    response_model=MessageResponse,
    responses=_WRITE_RESPONSES,
    summary="Rewrite category order from a list of ids",
)
async def reorder_categories(
    request: Request,
    _: None = Depends(require_password),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    payload = await parse_body(request, ReorderRequest)
    with storage_failure("Failed to reorder categories"):
        await category_service.reorder_categories(db, payload.ids)
    return MessageResponse(message="Categories reordered")


@router.api_route(
    "/categories/",
    methods=["GET", "POST", "PUT", "DELETE", "PATCH"],
    include_in_schema=False,
)
async def category_without_id() -> None:
    raise NotFoundError(resource="category")


@router.put(
    "/categories/{category_id}",
    response_model=MessageResponse,
    responses=_WRITE_RESPONSES,
    summary="Rename a category",
)
async def update_category(
    request: Request,
    category_id: int = Depends(category_id_param),
    _: None = Depends(require_password),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    payload = await read_category_payload(request)
    with storage_failure("Failed to update category"):
        await category_service.update_category(db, category_id, payload.name)
    return MessageResponse(message="Category updated")


@router.delete(
    "/categories/{category_id}",
    response_model=MessageResponse,
    responses=_WRITE_RESPONSES,
    summary="Delete a category and all of its bookmarks",
)
async def delete_category(
    category_id: int = Depends(category_id_param),
    _: None = Depends(require_password),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    with storage_failure("Failed to delete category"):
        await category_service.delete_category(db, category_id)
    return MessageResponse(message="Category deleted")
