"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.category import Category
from app.models.pivots import category_tool, role_tool_recommendations
from app.models.revoked_token import RevokedToken
from app.models.role import Role
from app.models.tool import Tool
from app.models.user import User

__all__ = [
    "Base",
    "Category",
    "RevokedToken",
    "Role",
    "Tool",
    "User",
    "category_tool",
    "role_tool_recommendations",
]
