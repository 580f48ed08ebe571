"""
LinkVault Backend — Bookmark Route Handlers
=============================================

What:  /api/bookmarks list, create, reorder, update and delete.
How:   Same layout as the category routes. Listing is public but redacted:
       `account` and `password` come back empty unless the request carries
       the shared password.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from linkvault.auth import is_authenticated, require_password
from linkvault.database import get_db_session
from linkvault.exceptions import NotFoundError, ValidationError
from linkvault.routes.common import (
    parse_body,
    parse_int64,
    parse_resource_id,
    storage_failure,
)
from linkvault.schemas.bookmark import (
    BookmarkPayload,
    BookmarkResponse,
    BookmarkWithCategoryResponse,
)
from linkvault.schemas.common import ErrorResponse, MessageResponse, ReorderRequest
from linkvault.services.bookmark_service import ALL_CATEGORIES, bookmark_service

router = APIRouter(prefix="/api", tags=["Bookmarks"])

_WRITE_RESPONSES = {
    400: {"description": "Invalid body or id", "model": ErrorResponse},
    401: {"description": "Wrong or missing password", "model": ErrorResponse},
    500: {"description": "Store failure", "model": ErrorResponse},
}


def bookmark_id_param(bookmark_id: str) -> int:
    """Path segment → integer id, or 400 "Invalid bookmark ID"."""
    return parse_resource_id(bookmark_id, "bookmark")


def category_filter_param(
    category_id: Optional[str] = Query(
        default=None,
        description="Only list bookmarks of this category; omit for all",
    ),
) -> int:
    """
    Optional `category_id` query filter.

    Absent or empty means every category. Anything that is not a base-10
    integer is rejected with 400 "Invalid category ID".
    """
    if not category_id:
        return ALL_CATEGORIES
    value = parse_int64(category_id)
    if value is None:
        raise ValidationError(message="Invalid category ID", field="category_id")
    return value


async def read_bookmark_payload(request: Request) -> BookmarkPayload:
    payload = await parse_body(request, BookmarkPayload)
    if not payload.title or not payload.url:
        raise ValidationError(message="Title and URL are required", field="title")
    return payload


@router.get(
    "/bookmarks",
    response_model=List[BookmarkWithCategoryResponse],
    responses={400: {"description": "Invalid category id", "model": ErrorResponse}},
    summary="List bookmarks in display order",
)
async def list_bookmarks(
    category_id: int = Depends(category_filter_param),
    authenticated: bool = Depends(is_authenticated),
    db: AsyncSession = Depends(get_db_session),
) -> List[BookmarkWithCategoryResponse]:
    with storage_failure("Failed to get bookmarks"):
        return await bookmark_service.list_bookmarks(
            db, category_id=category_id, redact_secrets=not authenticated
        )


@router.post(
    "/bookmarks",
    status_code=201,
    response_model=BookmarkResponse,
    responses=_WRITE_RESPONSES,
    summary="Create a bookmark at the end of the list",
)
async def create_bookmark(
    request: Request,
    _: None = Depends(require_password),
    db: AsyncSession = Depends(get_db_session),
) -> BookmarkResponse:
    payload = await read_bookmark_payload(request)
    with storage_failure("Failed to create bookmark"):
        bookmark = await bookmark_service.create_bookmark(db, payload)
    return BookmarkResponse.model_validate(bookmark)


@router.post(
    "/bookmarks/reorder",
    response_model=MessageResponse,
    responses=_WRITE_RESPONSES,
    summary="Rewrite bookmark order from a list of ids",
)
async def reorder_bookmarks(
    request: Request,
    _: None = Depends(require_password),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    payload = await parse_body(request, ReorderRequest)
    with storage_failure("Failed to reorder bookmarks"):
        await bookmark_service.reorder_bookmarks(db, payload.ids)
    return MessageResponse(message="Bookmarks reordered")


@router.api_route(
    "/bookmarks/",
    methods=["GET", "POST", "PUT", "DELETE", "PATCH"],
    include_in_schema=False,
)
async def bookmark_without_id() -> None:
    raise NotFoundError(resource="bookmark")


@router.put(
    "/bookmarks/{bookmark_id}",
    response_model=MessageResponse,
    responses=_WRITE_RESPONSES,
    summary="Replace a bookmark's fields (order is kept)",
)
async def update_bookmark(
    request: Request,
    bookmark_id: int = Depends(bookmark_id_param),
    _: None = Depends(require_password),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    payload = await read_bookmark_payload(request)
    with storage_failure("Failed to update bookmark"):
        await bookmark_service.update_bookmark(db, bookmark_id, payload)
    return MessageResponse(message="Bookmark updated")


@router.delete(
    "/bookmarks/{bookmark_id}",
    response_model=MessageResponse,
    responses=_WRITE_RESPONSES,
    summary="Delete one bookmark",
)
async def delete_bookmark(
    bookmark_id: int = Depends(bookmark_id_param),
    _: None = Depends(require_password),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    with storage_failure("Failed to delete bookmark"):
        await bookmark_service.delete_bookmark(db, bookmark_id)
    return MessageResponse(message="Bookmark deleted")
