"""ORM model for roles: lookup data assigned to users and recommended on tools."""

from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship

from app.models.base import Base
from app.models.mixins import TimestampMixin
from app.models.pivots import role_tool_recommendations


class Role(Base, TimestampMixin):
    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True, index=True)
    display_name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)

    users = relationship("User", back_populates="role", passive_deletes=True)
    tools = relationship(
        "Tool",
        secondary=role_tool_recommendations,
        back_populates="recommended_for_roles",
    )
