"""Login, logout and role checks over the credential and session stores."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from sqlalchemy.orm import Session

from app.core.errors import (
    AuthenticationFailed,
    Forbidden,
    Unauthenticated,
    VerificationRequired,
)
from app.core.security import dummy_password_hash, verify_password
from app.models import User
from app.schemas.auth import CurrentUser
from app.services.sessions import SessionStore

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, db: Session, sessions: SessionStore) -> None:
        self.db = db
        self.sessions = sessions

    def login(self, identity: str, password: str) -> tuple[str, CurrentUser]:
        """Return (session token, principal) for valid, verified credentials."""
        user = self.db.query(User).filter(User.username == identity).first()
        # Always run one bcrypt check, even for unknown identities.
        password_ok = verify_password(
            password, user.password_hash if user is not None else dummy_password_hash()
        )
        if user is None or not password_ok:
            logger.info(
                "Login failed",
                extra={"reason": "not_found_or_bad_password"},
            )
            raise AuthenticationFailed()
        if not user.verified:
            logger.info("Login failed", extra={"reason": "unverified", "user_id": user.id})
            raise VerificationRequired()

        token = self.sessions.create(user)
        logger.info("Login succeeded", extra={"user_id": user.id, "role": user.role})
        return token, CurrentUser(id=user.id, username=user.username, role=user.role)

    def logout(self, token: str | None) -> None:
        self.sessions.destroy(token)

    def current_session(self, token: str | None) -> CurrentUser:
        principal = self.sessions.get(token)
        if principal is None:
            raise Unauthenticated()
        return principal


def authorize(principal: CurrentUser | None, required_roles: Iterable[str]) -> CurrentUser:
    """Require a session whose role is exactly one of required_roles."""
    if principal is None:
        raise Unauthenticated()
    if principal.role not in {str(getattr(r, "value", r)) for r in required_roles}:
        raise Forbidden()
    return principal
