"""
LinkVault Backend — Bookmark Schemas
======================================

What:  API contract for the bookmarks resource.

Field names are part of the public contract and match the column names
exactly (`category_id`, `order`, ...). Optional text fields travel as empty
strings rather than null.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from linkvault.schemas.common import Int64


class BookmarkPayload(BaseModel):
    """
    Body of POST /api/bookmarks and PUT /api/bookmarks/{id}.

    Every field has a default so that missing values reach the handler's
    "Title and URL are required" check instead of failing body decoding.
    Any `id` or `order` sent by the client is ignored.
    """
    title: str = ""
    url: str = ""
    description: str = ""
    account: str = ""
    password: str = ""
    category_id: Int64 = 0
    icon: str = ""

    @field_validator(
        "title", "url", "description", "account", "password", "icon", mode="before"
    )
    @classmethod
    def null_to_empty(cls, v: Optional[str]) -> str:
        return "" if v is None else v


class BookmarkResponse(BaseModel):
    """A bookmark as returned by create."""
    id: int
    title: str
    url: str
    description: str = ""
    account: str = ""
    password: str = ""
    category_id: int
    icon: str = ""
    order: int

    model_config = {"from_attributes": True}


class BookmarkWithCategoryResponse(BookmarkResponse):
    """
    A bookmark as returned by list: the bookmark plus its category's name.

    `category_name` is null when the referenced category no longer exists.
    """
    category_name: Optional[str] = Field(default=None)
