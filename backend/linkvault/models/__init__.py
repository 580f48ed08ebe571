"""
LinkVault Backend — ORM Models
================================

Importing this package registers every table on `Base.metadata`
(used by `init_db` and Alembic).
"""

from linkvault.models.bookmark import Bookmark
from linkvault.models.category import Category

__all__ = ["Bookmark", "Category"]
