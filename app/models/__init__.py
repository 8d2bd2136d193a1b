"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.idea import Idea
from app.models.session import SessionRecord
from app.models.user import ADMIN_ROLES, SUPERADMIN_ONLY, Role, User
from app.models.verification import Verification

__all__ = [
    "ADMIN_ROLES",
    "Base",
    "Idea",
    "Role",
    "SUPERADMIN_ONLY",
    "SessionRecord",
    "User",
    "Verification",
]
