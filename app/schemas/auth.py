"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.role import RoleOut


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: str = Field(..., min_length=1, max_length=255, description="Account email")
    password: str = Field(..., min_length=1, max_length=128, description="Password")


class UserOut(BaseModel):
    """Public view of a user (no password hash), with its role when set."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    role: RoleOut | None = None


class LoginResponse(BaseModel):
    """Authenticated user and the bearer token to send on later requests."""

    user: UserOut
    token: str = Field(..., description="Send as 'Authorization: Bearer <token>'")
    token_type: str = Field(default="bearer", description="Token type")


class MeResponse(BaseModel):
    user: UserOut
