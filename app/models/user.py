"""ORM model for application users (authentication and tool ownership)."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from app.models.base import Base
from app.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """
    User account for bearer-token authentication.

    Owns the tools it creates. Deleting a user leaves those tools in place with
    no owner (tools.user_id is set to NULL).
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role_id = Column(
        Integer,
        ForeignKey("roles.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    role = relationship("Role", back_populates="users", lazy="joined")
    tools = relationship("Tool", back_populates="user", passive_deletes=True)
