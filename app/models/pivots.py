"""Many-to-many join tables between tools and categories / recommended roles."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Table, UniqueConstraint

from app.models.base import Base
from app.models.mixins import utcnow

category_tool = Table(
    "category_tool",
    Base.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "category_id",
        Integer,
        ForeignKey("categories.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    Column(
        "tool_id",
        Integer,
        ForeignKey("tools.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    Column("created_at", DateTime(timezone=True), nullable=False, default=utcnow),
    UniqueConstraint("category_id", "tool_id", name="uq_category_tool"),
)

role_tool_recommendations = Table(
    "role_tool_recommendations",
    Base.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "role_id",
        Integer,
        ForeignKey("roles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    Column(
        "tool_id",
        Integer,
        ForeignKey("tools.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    Column("created_at", DateTime(timezone=True), nullable=False, default=utcnow),
    UniqueConstraint("role_id", "tool_id", name="uq_role_tool_recommendation"),
)
