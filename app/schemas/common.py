"""Shared response schemas and field types."""

from typing import Annotated

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Response body for operations that only report an outcome."""

    message: str = Field(..., description="Human-readable outcome")


# Largest value an INTEGER primary key column holds on every supported store.
DB_INT_MAX = 2**31 - 1

# Identifier accepted in request bodies (e.g. category_ids items).
RecordId = Annotated[int, Field(ge=1, le=DB_INT_MAX)]


def reject_null(v: object) -> object:
    """Before-validator for partial updates: a sent field must not be null."""
    if v is None:
        raise ValueError("This field may not be null.")
    return v
