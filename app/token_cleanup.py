"""
CLI entrypoint for purging expired logout records. Run from cron, e.g.:

  python -m app.token_cleanup

Or daily: 0 3 * * * cd /path/to/tool-directory && .venv/bin/python -m app.token_cleanup
"""

import logging
import sys

from app.core.database import SessionLocal
from app.services.token_cleanup import purge_expired_revocations

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> int:
    """Delete revoked-token rows whose tokens have expired."""
    db = SessionLocal()
    try:
        deleted = purge_expired_revocations(db)
        logger.info("Token cleanup completed: revocations_deleted=%s", deleted)
        return 0
    except Exception as e:
        logger.exception("Token cleanup failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
