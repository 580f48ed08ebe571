"""
LinkVault Backend — Category Schemas
======================================

What:  API contract for the categories resource.
How:   Payloads are decoded by the route handlers with `model_validate_json`;
       responses are built from ORM rows with `from_attributes`.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class CategoryPayload(BaseModel):
    """
    Body of POST /api/categories and PUT /api/categories/{id}.

    `name` defaults to "" so that a missing name reaches the handler's
    "Name is required" check instead of failing body decoding.
    """
    name: str = Field(default="", description="Display name")

    @field_validator("name", mode="before")
    @classmethod
    def null_to_empty(cls, v: Optional[str]) -> str:
        return "" if v is None else v


class CategoryResponse(BaseModel):
    """A category as returned by list and create."""
    id: int = Field(description="Store-assigned identifier")
    name: str
    order: int = Field(description="Display position, ascending")

    model_config = {"from_attributes": True}
