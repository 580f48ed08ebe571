"""
LinkVault Backend — Display Ordering Helpers
==============================================

What:  The two ordering rules shared by categories and bookmarks.
How:   Both helpers take the mapped model class, so the same code serves any
       table with `id` and `order` columns. Callers run them inside a
       `scoped_transaction`.

Rules:
    - Append: a new row goes to the end, order = max(order) + 1 (1 when the
      table is empty).
    - Reorder: the i-th id of the supplied sequence gets order i + 1. Ids
      with no row update nothing; rows not mentioned keep their order.
"""

from typing import Iterable, Type, Union

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from linkvault.models import Bookmark, Category

OrderedModel = Union[Type[Category], Type[Bookmark]]


async def next_order(db: AsyncSession, model: OrderedModel) -> int:
    """Return the order value that places a new row after every existing one."""
    result = await db.execute(select(func.coalesce(func.max(model.order), 0)))
    return int(result.scalar_one()) + 1


async def apply_order(db: AsyncSession, model: OrderedModel, ids: Iterable[int]) -> None:
    """Overwrite `order` with 1..N following the sequence of `ids`."""
    for position, row_id in enumerate(ids, start=1):
        await db.execute(
            update(model)
            .where(model.id == row_id)
            .values(order=position)
        )
