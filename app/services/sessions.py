"""Server-side session store: create, resolve and destroy login sessions."""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

from app.core.clock import Clock, as_utc, utc_now
from app.core.security import hash_session_token, new_session_token
from app.models import SessionRecord, User
from app.schemas.auth import CurrentUser

if TYPE_CHECKING:
    from app.core.config import Settings


class SessionStore:
    def __init__(self, db: Session, settings: "Settings", now: Clock = utc_now) -> None:
        self.db = db
        self.settings = settings
        self.now = now

    def create(self, user: User) -> str:
        """Persist a snapshot of the user and return the raw token for the cookie."""
        token = new_session_token()
        created = self.now()
        self.db.add(
            SessionRecord(
                token_hash=hash_session_token(token),
                user_id=user.id,
                username=user.username,
                role=user.role,
                created_at=created,
                expires_at=created + timedelta(seconds=self.settings.SESSION_TTL_SECONDS),
            )
        )
        self.db.commit()
        return token

    def get(self, token: str | None) -> CurrentUser | None:
        """Return the session principal, or None if missing or expired (expired rows are dropped)."""
        if not token:
            return None
        row = self.db.get(SessionRecord, hash_session_token(token))
        if row is None:
            return None
        if as_utc(row.expires_at) <= self.now():
            self.db.delete(row)
            self.db.commit()
            return None
        return CurrentUser(id=row.user_id, username=row.username, role=row.role)

    def destroy(self, token: str | None) -> None:
        """Delete the session if present. No-op otherwise."""
        if not token:
            return
        self.db.query(SessionRecord).filter(
            SessionRecord.token_hash == hash_session_token(token)
        ).delete(synchronize_session=False)
        self.db.commit()
