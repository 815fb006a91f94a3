"""ORM model for bearer tokens invalidated by logout."""

from sqlalchemy import Column, DateTime, Integer, String

from app.models.base import Base
from app.models.mixins import utcnow


class RevokedToken(Base):
    """
    One row per logged-out JWT, keyed by its jti claim.

    Rows past expires_at are useless (the token fails exp validation anyway) and
    are purged by the token cleanup job.
    """

    __tablename__ = "revoked_tokens"

    id = Column(Integer, primary_key=True, autoincrement=True)
    jti = Column(String(64), nullable=False, unique=True, index=True)
    user_id = Column(Integer, nullable=True)
    expires_at = Column(DateTime(timezone=True), nullable=False, index=True)
    revoked_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
