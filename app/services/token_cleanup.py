"""Revoked-token upkeep: drop logout records whose tokens have already expired."""

import logging
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from app.models import RevokedToken

logger = logging.getLogger(__name__)


def purge_expired_revocations(session: Session, now: datetime | None = None) -> int:
    """
    Delete revoked_tokens rows with expires_at in the past and return how many.

    An expired token is rejected by exp validation alone, so its revocation row
    no longer matters. Idempotent: safe to run repeatedly.
    """
    cutoff = now or datetime.now(timezone.utc)
    deleted_count = (
        session.query(RevokedToken)
        .filter(RevokedToken.expires_at < cutoff)
        .delete(synchronize_session=False)
    )
    session.commit()

    if deleted_count > 0:
        logger.info(
            "Token cleanup run: cutoff=%s, revocations_deleted=%s",
            cutoff.isoformat(),
            deleted_count,
        )
    return deleted_count
