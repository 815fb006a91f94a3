"""ORM model for catalog tools."""

from sqlalchemy import JSON, Column, ForeignKey, Integer, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship

from app.models.base import Base
from app.models.mixins import TimestampMixin
from app.models.pivots import category_tool, role_tool_recommendations

# JSONB on PostgreSQL enables the @> containment used by the tag filter.
JSONList = JSON().with_variant(JSONB(), "postgresql")


class Tool(Base, TimestampMixin):
    """
    A catalog entry (e.g. an AI product) owned by the user who created it.

    tags and images are JSON arrays of strings. Categories and recommended roles
    live in the category_tool and role_tool_recommendations pivots.
    """

    __tablename__ = "tools"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, index=True)
    link = Column(String(2048), nullable=False)
    description = Column(Text, nullable=False)
    official_documentation = Column(Text, nullable=True)
    how_to_use = Column(Text, nullable=True)
    real_examples = Column(Text, nullable=True)
    tags = Column(JSONList, nullable=True)
    images = Column(JSONList, nullable=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    user = relationship("User", back_populates="tools")
    categories = relationship(
        "Category",
        secondary=category_tool,
        back_populates="tools",
        order_by="Category.id",
    )
    recommended_for_roles = relationship(
        "Role",
        secondary=role_tool_recommendations,
        back_populates="tools",
        order_by="Role.id",
    )
