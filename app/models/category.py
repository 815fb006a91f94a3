"""ORM model for tool categories."""

from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship

from app.models.base import Base
from app.models.mixins import TimestampMixin
from app.models.pivots import category_tool


class Category(Base, TimestampMixin):
    """
    Category a tool can be filed under.

    slug is derived from name and kept unique; deleting a category only removes
    its category_tool rows.
    """

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True, index=True)
    slug = Column(String(255), nullable=False, unique=True, index=True)
    description = Column(Text, nullable=True)

    tools = relationship("Tool", secondary=category_tool, back_populates="categories")
