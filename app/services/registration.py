"""
Registration workflow: request a code, confirm it, complete the account.

A verification entry is valid only when looked up by its (id, code) pair and
only for VERIFICATION_TTL_SECONDS after creation. Both confirm and complete
re-check expiry against the stored creation time; an expired entry is deleted
on lookup.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.clock import Clock, as_utc, utc_now
from app.core.errors import (
    AccountCreationFailed,
    ConsentRequired,
    IdentityTaken,
    MailDeliveryFailed,
    ValidationError,
    VerificationExpired,
    VerificationNotFound,
)
from app.core.security import (
    generate_verification_code,
    hash_password,
    new_verification_id,
    normalize_verification_code,
)
from app.models import Role, User, Verification
from app.services.mailer import (
    VERIFICATION_SUBJECT,
    MailTransport,
    MailTransportError,
    verification_message,
)

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)


class RegistrationService:
    def __init__(
        self,
        db: Session,
        settings: "Settings",
        mailer: MailTransport,
        now: Clock = utc_now,
    ) -> None:
        self.db = db
        self.settings = settings
        self.mailer = mailer
        self.now = now

    @property
    def ttl(self) -> timedelta:
        return timedelta(seconds=self.settings.VERIFICATION_TTL_SECONDS)

    def request_registration(self, identity: str, password: str, consent_given: bool) -> str:
        """
        Store a new verification entry for identity and email its code.

        Returns the verification id. The entry is kept when mail delivery fails.
        """
        if not consent_given:
            raise ConsentRequired()
        if not password:
            raise ValidationError("Password is required.")
        if self.db.query(User.id).filter(User.username == identity).first() is not None:
            raise IdentityTaken()

        verification = Verification(
            id=new_verification_id(),
            email=identity,
            code=generate_verification_code(),
            created_at=self.now(),
        )
        self.db.add(verification)
        self.db.commit()

        try:
            self.mailer.send(
                verification.email,
                VERIFICATION_SUBJECT,
                verification_message(verification.code),
            )
        except MailTransportError as e:
            logger.error(
                "Verification mail failed",
                extra={"verify_id": verification.id, "reason": e.message[:500]},
            )
            raise MailDeliveryFailed() from e

        logger.info("Registration requested", extra={"verify_id": verification.id})
        return verification.id

    def confirm_code(self, verify_id: str, code: str) -> None:
        """Check a code without consuming it."""
        self._valid_entry(verify_id, code)

    def complete_registration(
        self,
        verify_id: str,
        identity: str,
        password: str,
        display_name: str | None = None,
        code: str | None = None,
    ) -> User:
        """Create a verified 'user' account and consume the verification entry."""
        entry = self._valid_entry(verify_id, code)
        if identity != entry.email:
            logger.warning(
                "Identity does not match verified address", extra={"verify_id": verify_id}
            )
            raise VerificationNotFound()

        user = User(
            username=identity,
            email=entry.email,
            display_name=display_name,
            password_hash=hash_password(password),
            verified=True,
            role=Role.user.value,
        )
        self.db.add(user)
        self.db.delete(entry)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning("Account creation conflict", extra={"verify_id": verify_id})
            raise AccountCreationFailed() from e

        logger.info("Account created", extra={"user_id": user.id, "verify_id": verify_id})
        return user

    def _valid_entry(self, verify_id: str, code: str | None) -> Verification:
        query = self.db.query(Verification).filter(Verification.id == verify_id)
        if code is not None:
            query = query.filter(Verification.code == normalize_verification_code(code))
        entry = query.first()
        if entry is None:
            raise VerificationNotFound()

        if self.now() - as_utc(entry.created_at) > self.ttl:
            self.db.delete(entry)
            self.db.commit()
            logger.info("Verification expired", extra={"verify_id": verify_id})
            raise VerificationExpired()
        return entry
