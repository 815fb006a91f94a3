"""Pydantic request/response schemas."""

from app.schemas.auth import LoginRequest, LoginResponse, MeResponse, UserOut
from app.schemas.category import (
    CategoryCreate,
    CategoryListResponse,
    CategoryOut,
    CategoryResponse,
    CategoryUpdate,
    CategoryWithCount,
)
from app.schemas.common import MessageResponse
from app.schemas.health import HealthResponse
from app.schemas.role import RoleCreate, RoleListResponse, RoleOut, RoleResponse, RoleUpdate
from app.schemas.tool import ToolCreate, ToolOut, ToolPage, ToolResponse, ToolUpdate

__all__ = [
    "CategoryCreate",
    "CategoryListResponse",
    "CategoryOut",
    "CategoryResponse",
    "CategoryUpdate",
    "CategoryWithCount",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "MeResponse",
    "MessageResponse",
    "RoleCreate",
    "RoleListResponse",
    "RoleOut",
    "RoleResponse",
    "RoleUpdate",
    "ToolCreate",
    "ToolOut",
    "ToolPage",
    "ToolResponse",
    "ToolUpdate",
    "UserOut",
]
