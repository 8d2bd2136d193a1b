"""ORM model for application users (credentials, verification flag and role)."""

from enum import Enum

from sqlalchemy import Boolean, Column, Integer, String

from app.models.base import Base


class Role(str, Enum):
    user = "user"
    admin = "admin"
    superadmin = "superadmin"


# Roles accepted by admin-gated routes. There is no implicit hierarchy.
ADMIN_ROLES = frozenset({Role.admin, Role.superadmin})
SUPERADMIN_ONLY = frozenset({Role.superadmin})


class User(Base):
    """
    User account for session authentication and role-based access control.

    username is the login identity (an email address); email is the address
    proven through verification. role: 'user', 'admin' or 'superadmin'.
    """

    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    email = Column(String(255), nullable=True, unique=True)
    display_name = Column(String(255), nullable=True)
    password_hash = Column(String(255), nullable=False)
    verified = Column(Boolean, nullable=False, default=False)
    role = Column(String(32), nullable=False, default=Role.user.value)
