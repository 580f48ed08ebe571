"""
LinkVault Backend — Route Helpers
===================================

What:  Small pieces every resource router needs: body decoding, id parsing
       and translating store failures into DatabaseError.
"""

import re
from contextlib import contextmanager
from typing import Iterator, Optional, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError

from linkvault.exceptions import DatabaseError, ValidationError
from linkvault.schemas.common import INT64_MAX, INT64_MIN

SchemaT = TypeVar("SchemaT", bound=BaseModel)

# Base-10 integer with optional sign, as accepted for path and query ids
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_int64(raw: Optional[str]) -> Optional[int]:
    """Parse a signed 64-bit base-10 integer; None if `raw` is not one."""
    if raw is None or not _INTEGER_RE.fullmatch(raw):
        return None
    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        return None
    return value


def parse_resource_id(raw: str, resource: str) -> int:
    """
    Turn the `{id}` path segment into an integer.

    Raises:
        ValidationError: "Invalid <resource> ID" (→ 400)
    """
    value = parse_int64(raw)
    if value is None:
        raise ValidationError(message=f"Invalid {resource} ID", field="id")
    return value


async def parse_body(request: Request, schema: Type[SchemaT]) -> SchemaT:
    """
    Decode the JSON request body into `schema`.

    Decoding happens inside the handler, after the auth gate has already
    accepted the request.

    Raises:
        ValidationError: "Invalid request body" for malformed JSON, an empty
        body or a wrongly typed field (→ 400)
    """
    raw = await request.body()
    try:
        return schema.model_validate_json(raw)
    except PydanticValidationError as exc:
        raise ValidationError(
            message="Invalid request body",
            context={"errors": exc.error_count()},
        ) from exc


@contextmanager
def storage_failure(message: str) -> Iterator[None]:
    """
    Convert store errors raised inside the block into DatabaseError.

    Usage:
        with storage_failure("Failed to create category"):
            category = await category_service.create_category(db, name)
    """
    try:
        yield
    except SQLAlchemyError as exc:
        raise DatabaseError(
            message=message,
            context={"error_type": type(exc).__name__, "detail": str(exc)},
        ) from exc
