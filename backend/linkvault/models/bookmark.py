"""
LinkVault Backend — Bookmark SQLAlchemy Model
===============================================

What:  ORM model representing the `bookmarks` table.
Who:   Used by BookmarkService; deleted in bulk by CategoryService when the
       owning category goes away.

Table Design:
    - title / url: required text
    - description / account / password / icon: optional text, stored as ''
      when the client omits them
    - category_id: declared foreign key to categories.id (no index). SQLite
      does not enforce it unless the foreign_keys pragma is on, which this
      service leaves off, so listing tolerates orphans.
    - order: display position across the whole table, not per category
"""

from typing import Optional

from sqlalchemy import ForeignKey, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from linkvault.database import Base


class Bookmark(Base):
    """A stored link with optional credentials, belonging to one category."""

    __tablename__ = "bookmarks"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    title: Mapped[str] = mapped_column(Text, nullable=False)
    url: Mapped[str] = mapped_column(Text, nullable=False)

    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Credentials for the linked site. Returned verbatim only to callers
    # holding the shared password; everyone else sees empty strings.
    account: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    password: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    category_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("categories.id"),
        nullable=False,
    )

    icon: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    order: Mapped[int] = mapped_column(
        "order",
        Integer,
        nullable=False,
        default=0,
        server_default=text("0"),
    )

    def __repr__(self) -> str:
        return (
            f"<Bookmark(id={self.id}, title='{self.title}', "
            f"category_id={self.category_id}, order={self.order})>"
        )
