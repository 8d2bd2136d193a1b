"""Periodic cleanup: delete expired verification entries and sessions."""

import logging
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

from app.models import SessionRecord, Verification

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)


def purge_expired(session: Session, settings: "Settings", now: datetime) -> tuple[int, int]:
    """
    Delete verifications older than VERIFICATION_TTL_SECONDS and sessions past
    expires_at. Returns (verifications_deleted, sessions_deleted). Idempotent.
    """
    cutoff = now - timedelta(seconds=settings.VERIFICATION_TTL_SECONDS)
    verifications_deleted = (
        session.query(Verification)
        .filter(Verification.created_at < cutoff)
        .delete(synchronize_session=False)
    )
    sessions_deleted = (
        session.query(SessionRecord)
        .filter(SessionRecord.expires_at <= now)
        .delete(synchronize_session=False)
    )
    session.commit()

    if verifications_deleted or sessions_deleted:
        logger.info(
            "Sweep run: cutoff=%s, verifications_deleted=%s, sessions_deleted=%s",
            cutoff.isoformat(),
            verifications_deleted,
            sessions_deleted,
        )
    return (verifications_deleted, sessions_deleted)
