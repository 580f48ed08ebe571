"""
LinkVault Backend — Category SQLAlchemy Model
===============================================

What:  ORM model representing the `categories` table.
Who:   Used by CategoryService for CRUD and reordering, and joined by
       BookmarkService to report each bookmark's category name.

Table Design:
    - id: INTEGER AUTOINCREMENT primary key, assigned by SQLite on insert;
      ids of deleted rows are never reused
    - name: free text, never empty (enforced by the route layer)
    - order: display position; ascending order is display order. Not unique,
      only the relative sequence matters.
"""

from sqlalchemy import Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from linkvault.database import Base


class Category(Base):
    """
    A named, ordered grouping of bookmarks.

    Lifecycle:
        1. Created at the end of the display sequence (max order + 1)
        2. Renamed through update; `order` only moves through reorder
        3. Deleted together with all of its bookmarks in one transaction
    """

    __tablename__ = "categories"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    name: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    # "order" is an SQL keyword; SQLAlchemy quotes the column name for us
    order: Mapped[int] = mapped_column(
        "order",
        Integer,
        nullable=False,
        default=0,
        server_default=text("0"),
    )

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name='{self.name}', order={self.order})>"
