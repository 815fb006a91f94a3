"""Request/response schemas for tool endpoints."""

from datetime import datetime
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.schemas.auth import UserOut
from app.schemas.category import CategoryOut
from app.schemas.common import RecordId, reject_null
from app.schemas.role import RoleOut

NAME_MAX_LENGTH = 255
LINK_MAX_LENGTH = 2048
ALLOWED_LINK_SCHEMES = ("http", "https")


def _validate_link(v: str) -> str:
    s = v.strip()
    parts = urlsplit(s)
    if parts.scheme.lower() not in ALLOWED_LINK_SCHEMES or not parts.netloc:
        raise ValueError("The link must be a valid URL (http or https).")
    return s


class ToolCreate(BaseModel):
    """New tool. The authenticated caller becomes its owner."""

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    link: str = Field(..., min_length=1, max_length=LINK_MAX_LENGTH)
    description: str = Field(..., min_length=1)
    official_documentation: str | None = None
    how_to_use: str | None = None
    real_examples: str | None = None
    tags: list[str] | None = None
    images: list[str] | None = None
    category_ids: list[RecordId] = Field(
        ...,
        min_length=1,
        description="Existing category ids; at least one is required.",
    )
    role_ids: list[RecordId] | None = Field(
        default=None,
        description="Existing role ids the tool is recommended for.",
    )

    @field_validator("link")
    @classmethod
    def validate_link(cls, v: str) -> str:
        return _validate_link(v)


class ToolUpdate(BaseModel):
    """
    Partial update. Fields left out of the body keep their stored values.

    category_ids / role_ids, when given, replace the whole association set.
    """

    name: str | None = Field(default=None, min_length=1, max_length=NAME_MAX_LENGTH)
    link: str | None = Field(default=None, min_length=1, max_length=LINK_MAX_LENGTH)
    description: str | None = Field(default=None, min_length=1)
    official_documentation: str | None = None
    how_to_use: str | None = None
    real_examples: str | None = None
    tags: list[str] | None = None
    images: list[str] | None = None
    category_ids: list[RecordId] | None = Field(default=None, min_length=1)
    role_ids: list[RecordId] | None = None

    @field_validator("link")
    @classmethod
    def validate_link(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return _validate_link(v)

    @field_validator("name", "link", "description", "category_ids", mode="before")
    @classmethod
    def reject_null_fields(cls, v: object) -> object:
        return reject_null(v)


class ToolOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    link: str
    description: str
    official_documentation: str | None = None
    how_to_use: str | None = None
    real_examples: str | None = None
    tags: list[str] | None = None
    images: list[str] | None = None
    user_id: int | None = None
    created_at: datetime
    updated_at: datetime
    categories: list[CategoryOut] = Field(default_factory=list)
    recommended_for_roles: list[RoleOut] = Field(default_factory=list)
    user: UserOut | None = None


class ToolResponse(BaseModel):
    tool: ToolOut
    message: str | None = None


class ToolPage(BaseModel):
    """One page of tools, newest first, with pagination metadata."""

    data: list[ToolOut]
    current_page: int = Field(..., ge=1)
    last_page: int = Field(..., ge=1)
    per_page: int = Field(..., ge=1)
    total: int = Field(..., ge=0)
