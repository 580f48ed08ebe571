"""
LinkVault Backend — Category Service
======================================

What:  Persistence rules for categories: listing, append-ordered creation,
       rename, cascading delete and batch reorder.
How:   Each method receives the request's AsyncSession. Writes run inside a
       `scoped_transaction`, so a failure part-way through leaves the tables
       exactly as they were.
Who:   Called by the /api/categories route handlers.

Error Handling:
    SQLAlchemy errors propagate unchanged. The route decides what the client
    sees; nothing here retries.
"""

import logging
from typing import List, Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from linkvault.database import scoped_transaction
from linkvault.models import Bookmark, Category
from linkvault.services.ordering import apply_order, next_order

logger = logging.getLogger(__name__)


class CategoryService:
    """Stateless store operations for the `categories` table."""

    async def list_categories(self, db: AsyncSession) -> List[Category]:
        """All categories, ascending by display order."""
        result = await db.execute(
            select(Category).order_by(Category.order.asc(), Category.id.asc())
        )
        return list(result.scalars().all())

    async def create_category(self, db: AsyncSession, name: str) -> Category:
        """
        Insert a category at the end of the display sequence.

        Returns:
            The persisted row, including its assigned id and order.
        """
        async with scoped_transaction(db):
            category = Category(name=name, order=await next_order(db, Category))
            db.add(category)
            await db.flush()  # Assigns the autoincrement id
        logger.info("Category created: id=%s order=%s", category.id, category.order)
        return category

    async def update_category(self, db: AsyncSession, category_id: int, name: str) -> None:
        """Rename a category. A missing id is not an error."""
        async with scoped_transaction(db):
            await db.execute(
                update(Category)
                .where(Category.id == category_id)
                .values(name=name)
            )
        logger.info("Category updated: id=%s", category_id)

    async def delete_category(self, db: AsyncSession, category_id: int) -> None:
        """
        Delete a category and every bookmark in it.

        Both deletes share one transaction: readers either see the category
        with its bookmarks or neither of them.
        """
        async with scoped_transaction(db):
            removed = await db.execute(
                delete(Bookmark)
                .where(Bookmark.category_id == category_id)
            )
            await db.execute(
                delete(Category)
                .where(Category.id == category_id)
            )
        logger.info(
            "Category deleted: id=%s (with %d bookmarks)", category_id, removed.rowcount
        )

    async def reorder_categories(self, db: AsyncSession, ids: Sequence[int]) -> None:
        """Set order 1..N following `ids`, all or nothing."""
        async with scoped_transaction(db):
            await apply_order(db, Category, ids)
        logger.info("Categories reordered: %d ids", len(ids))


# ── Singleton Instance ────────────────────────────────────────────────────
category_service = CategoryService()
