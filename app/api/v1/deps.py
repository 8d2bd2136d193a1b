"""Shared FastAPI dependencies: clock, mail transport, services and session/role guards."""

from collections.abc import Callable
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.core.clock import Clock, utc_now
from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.core.errors import Unauthenticated
from app.models import ADMIN_ROLES, SUPERADMIN_ONLY
from app.schemas.auth import CurrentUser
from app.services.auth import AuthService, authorize
from app.services.ideas import IdeaService
from app.services.mailer import MailTransport
from app.services.registration import RegistrationService
from app.services.sessions import SessionStore
from app.services.users import UserAdminService


def get_clock() -> Clock:
    return utc_now


def get_mail_transport(request: Request) -> MailTransport:
    """Transport built once at startup (see app.main lifespan)."""
    return request.app.state.mail_transport


def get_session_store(
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
    now: Annotated[Clock, Depends(get_clock)],
) -> SessionStore:
    return SessionStore(db, settings, now)


def get_auth_service(
    db: Annotated[Session, Depends(get_db)],
    sessions: Annotated[SessionStore, Depends(get_session_store)],
) -> AuthService:
    return AuthService(db, sessions)


def get_registration_service(
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
    mailer: Annotated[MailTransport, Depends(get_mail_transport)],
    now: Annotated[Clock, Depends(get_clock)],
) -> RegistrationService:
    return RegistrationService(db, settings, mailer, now)


def get_idea_service(
    db: Annotated[Session, Depends(get_db)],
    now: Annotated[Clock, Depends(get_clock)],
) -> IdeaService:
    return IdeaService(db, now)


def get_user_admin_service(db: Annotated[Session, Depends(get_db)]) -> UserAdminService:
    return UserAdminService(db)


def get_session_token(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
) -> str | None:
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


def get_optional_user(
    token: Annotated[str | None, Depends(get_session_token)],
    sessions: Annotated[SessionStore, Depends(get_session_store)],
) -> CurrentUser | None:
    return sessions.get(token)


def get_current_user(
    principal: Annotated[CurrentUser | None, Depends(get_optional_user)],
) -> CurrentUser:
    """Dependency: require an active session. Raises Unauthenticated (401) otherwise."""
    if principal is None:
        raise Unauthenticated()
    return principal


def require_roles(roles: frozenset) -> Callable[..., CurrentUser]:
    """Build a dependency accepting exactly the given roles (401 without session, 403 otherwise)."""

    def dependency(
        principal: Annotated[CurrentUser | None, Depends(get_optional_user)],
    ) -> CurrentUser:
        return authorize(principal, roles)

    return dependency


require_admin = require_roles(ADMIN_ROLES)
require_superadmin = require_roles(SUPERADMIN_ONLY)
