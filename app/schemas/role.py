"""Request/response schemas for role endpoints."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.schemas.common import reject_null


class RoleCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, description="Unique role key")
    display_name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None


class RoleUpdate(BaseModel):
    """Partial update; only fields present in the body are applied."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    display_name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None

    @field_validator("name", "display_name", mode="before")
    @classmethod
    def reject_null_fields(cls, v: object) -> object:
        return reject_null(v)


class RoleOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    display_name: str
    description: str | None = None


class RoleListResponse(BaseModel):
    roles: list[RoleOut]


class RoleResponse(BaseModel):
    role: RoleOut
    message: str | None = None
