"""Request/response schemas for category endpoints."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.schemas.common import reject_null


class CategoryCreate(BaseModel):
    """New category; slug is derived from name on the server."""

    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None


class CategoryUpdate(BaseModel):
    """Partial update; slug is re-derived only when name changes."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None

    @field_validator("name", mode="before")
    @classmethod
    def reject_null_name(cls, v: object) -> object:
        return reject_null(v)


class CategoryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    slug: str
    description: str | None = None


class CategoryWithCount(CategoryOut):
    """Category as listed, annotated with the number of tools filed under it."""

    tools_count: int = Field(default=0, ge=0)


class CategoryListResponse(BaseModel):
    categories: list[CategoryWithCount]


class CategoryResponse(BaseModel):
    category: CategoryOut
    message: str | None = None
