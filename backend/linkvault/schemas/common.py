"""
LinkVault Backend — Shared Request/Response Schemas
=====================================================

What:  Envelopes shared by both resources: reorder requests, status messages,
       errors and the auth check result.
"""

from typing import Annotated, List, Optional

from pydantic import BaseModel, Field, field_validator

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# A JSON integer that fits an SQLite INTEGER column; "1" and 1.5 are rejected
Int64 = Annotated[int, Field(strict=True, ge=INT64_MIN, le=INT64_MAX)]


class ReorderRequest(BaseModel):
    """
    What:  Body of POST /api/categories/reorder and /api/bookmarks/reorder.
    How:   The position of an id in `ids` becomes its new order (1-based).
           Unknown ids are accepted and ignored by the store; ids left out
           keep their current order. A missing or null list reorders nothing.
    """
    ids: List[Int64] = Field(default_factory=list, description="Ids in display order")

    @field_validator("ids", mode="before")
    @classmethod
    def null_means_empty(cls, v: Optional[list]) -> list:
        return [] if v is None else v


class MessageResponse(BaseModel):
    """Acknowledgement for update, delete and reorder, e.g. "Category updated"."""
    message: str


class ErrorResponse(BaseModel):
    """Body of every JSON error response."""
    error: str = Field(description="Human-readable error description")


class AuthCheckResponse(BaseModel):
    """Result of GET /api/auth/check."""
    authenticated: bool
