"""ORM model for server-side login sessions."""

from sqlalchemy import Column, DateTime, Integer, String

from app.models.base import Base


class SessionRecord(Base):
    """
    Snapshot of {id, username, role} taken at login, keyed by the keyed hash of
    the cookie token. Role changes made later do not touch existing rows.
    """

    __tablename__ = "sessions"

    token_hash = Column(String(64), primary_key=True)
    user_id = Column(Integer, nullable=False, index=True)
    username = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
    expires_at = Column(DateTime(timezone=True), nullable=False, index=True)
