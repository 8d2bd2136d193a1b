"""Role administration: list users, toggle user/admin, delete users, seed the superadmin."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

from app.core.errors import UserNotFound
from app.core.security import hash_password
from app.models import Role, SessionRecord, User

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)


def toggled_role(current: str) -> str:
    """admin -> user, anything else -> admin (a superadmin target becomes admin)."""
    return Role.user.value if current == Role.admin.value else Role.admin.value


class UserAdminService:
    def __init__(self, db: Session) -> None:
        self.db = db

    def list_users(self) -> list[User]:
        return self.db.query(User).order_by(User.id).all()

    def toggle_admin_role(self, target_user_id: int, actor_id: int | None = None) -> str:
        """Flip the target between user and admin; returns the new role."""
        user = self.db.get(User, target_user_id)
        if user is None:
            raise UserNotFound()
        if user.role == Role.superadmin.value:
            logger.warning(
                "Role toggle applied to a superadmin; demoting to admin",
                extra={"target_user_id": target_user_id, "actor_id": actor_id},
            )
        new_role = toggled_role(user.role)
        user.role = new_role
        self.db.commit()
        logger.info(
            "Role changed",
            extra={"target_user_id": target_user_id, "actor_id": actor_id, "new_role": new_role},
        )
        return new_role

    def delete_user(self, target_user_id: int, actor_id: int | None = None) -> int:
        """Delete by id with no self/last-superadmin protection. Returns rows deleted."""
        self.db.query(SessionRecord).filter(SessionRecord.user_id == target_user_id).delete(
            synchronize_session=False
        )
        deleted = (
            self.db.query(User)
            .filter(User.id == target_user_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        logger.info(
            "User deleted",
            extra={"target_user_id": target_user_id, "actor_id": actor_id, "deleted": deleted},
        )
        return deleted


def seed_superadmin(db: Session, settings: "Settings") -> User | None:
    """
    Create the configured superadmin if SUPERADMIN_USERNAME/PASSWORD are set and
    the user does not exist yet. Returns the created user, else None.
    """
    if not settings.SUPERADMIN_USERNAME or settings.SUPERADMIN_PASSWORD is None:
        return None
    username = settings.SUPERADMIN_USERNAME.strip()
    if db.query(User.id).filter(User.username == username).first() is not None:
        return None
    user = User(
        username=username,
        email=username if "@" in username else None,
        password_hash=hash_password(settings.SUPERADMIN_PASSWORD.get_secret_value()),
        verified=True,
        role=Role.superadmin.value,
    )
    db.add(user)
    db.commit()
    logger.info("Seeded superadmin", extra={"user_id": user.id})
    return user
