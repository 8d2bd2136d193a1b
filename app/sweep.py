"""
CLI entrypoint for the expired-entry sweep. Run from cron, e.g.:

  python -m app.sweep

Or every 10 minutes: */10 * * * * cd /path/to/idea-graveyard && .venv/bin/python -m app.sweep
"""

import logging
import sys

from app.core.clock import utc_now
from app.core.config import get_settings
from app.core.database import SessionLocal
from app.services.sweep import purge_expired

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> int:
    """Delete expired verification entries and sessions."""
    settings = get_settings()
    db = SessionLocal()
    try:
        verifications_deleted, sessions_deleted = purge_expired(db, settings, utc_now())
        logger.info(
            "Sweep completed: verifications_deleted=%s, sessions_deleted=%s",
            verifications_deleted,
            sessions_deleted,
        )
        return 0
    except Exception as e:
        logger.exception("Sweep job failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
