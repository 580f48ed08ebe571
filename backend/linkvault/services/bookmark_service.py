"""
LinkVault Backend — Bookmark Service
======================================

What:  Persistence rules for bookmarks: filtered listing with category names
       and credential redaction, append-ordered creation, full update,
       delete and batch reorder.
How:   Same shape as CategoryService; every write runs inside a
       `scoped_transaction` on the request's session.
Who:   Called by the /api/bookmarks route handlers.

Redaction:
    Listing always selects the stored `account` and `password` columns and
    blanks them afterwards when the caller is not authenticated. The query
    is identical for both callers.
"""

import logging
from typing import List, Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from linkvault.database import scoped_transaction
from linkvault.models import Bookmark, Category
from linkvault.schemas.bookmark import BookmarkPayload, BookmarkWithCategoryResponse
from linkvault.services.ordering import apply_order, next_order

logger = logging.getLogger(__name__)

# category_id value meaning "do not filter by category"
ALL_CATEGORIES = 0


class BookmarkService:
    """Stateless store operations for the `bookmarks` table."""

    async def list_bookmarks(
        self,
        db: AsyncSession,
        category_id: int = ALL_CATEGORIES,
        redact_secrets: bool = True,
    ) -> List[BookmarkWithCategoryResponse]:
        """
        Bookmarks ascending by display order, each with its category's name.

        Args:
            db: Async database session
            category_id: Only this category's bookmarks; ALL_CATEGORIES for all
            redact_secrets: Blank `account` and `password` in the result

        Returns:
            A list (possibly empty). `category_name` is None for bookmarks
            whose category row is missing.
        """
        query = (
            select(Bookmark, Category.name)
            .outerjoin(Category, Bookmark.category_id == Category.id)
            .order_by(Bookmark.order.asc(), Bookmark.id.asc())
        )
        if category_id != ALL_CATEGORIES:
            query = query.where(Bookmark.category_id == category_id)

        result = await db.execute(query)

        bookmarks = []
        for bookmark, category_name in result.all():
            bookmarks.append(
                BookmarkWithCategoryResponse(
                    id=bookmark.id,
                    title=bookmark.title,
                    url=bookmark.url,
                    description=bookmark.description or "",
                    account=bookmark.account or "",
                    password=bookmark.password or "",
                    category_id=bookmark.category_id,
                    icon=bookmark.icon or "",
                    order=bookmark.order,
                    category_name=category_name,
                )
            )

        if redact_secrets:
            for item in bookmarks:
                item.account = ""
                item.password = ""

        return bookmarks

    async def create_bookmark(self, db: AsyncSession, payload: BookmarkPayload) -> Bookmark:
        """
        Insert a bookmark at the end of the display sequence.

        The order counter spans the whole table, not just the target category.
        The category is not checked for existence first.
        """
        async with scoped_transaction(db):
            bookmark = Bookmark(
                **payload.model_dump(),
                order=await next_order(db, Bookmark),
            )
            db.add(bookmark)
            await db.flush()
        logger.info(
            "Bookmark created: id=%s category_id=%s order=%s",
            bookmark.id,
            bookmark.category_id,
            bookmark.order,
        )
        return bookmark

    async def update_bookmark(
        self, db: AsyncSession, bookmark_id: int, payload: BookmarkPayload
    ) -> None:
        """Overwrite every field except `order`. A missing id is not an error."""
        async with scoped_transaction(db):
            await db.execute(
                update(Bookmark)
                .where(Bookmark.id == bookmark_id)
                .values(**payload.model_dump())
            )
        logger.info("Bookmark updated: id=%s", bookmark_id)

    async def delete_bookmark(self, db: AsyncSession, bookmark_id: int) -> None:
        async with scoped_transaction(db):
            await db.execute(
                delete(Bookmark)
                .where(Bookmark.id == bookmark_id)
            )
        logger.info("Bookmark deleted: id=%s", bookmark_id)

    async def reorder_bookmarks(self, db: AsyncSession, ids: Sequence[int]) -> None:
        """Set order 1..N following `ids`, all or nothing."""
        async with scoped_transaction(db):
            await apply_order(db, Bookmark, ids)
        logger.info("Bookmarks reordered: %d ids", len(ids))


# ── Singleton Instance ────────────────────────────────────────────────────
bookmark_service = BookmarkService()
