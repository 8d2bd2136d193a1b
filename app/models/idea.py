"""ORM model for idea records."""

from sqlalchemy import Column, ForeignKey, Integer, String, Text

from app.models.base import Base


class Idea(Base):
    """
    An idea posted by a user. Never updated in place.

    date is the ISO-8601 creation instant assigned by the server. user_id keeps
    the author reference; it becomes NULL when the author is deleted and
    listings left-join so the idea is still returned. Ids are never reused,
    so a later account cannot inherit the idea.
    """

    __tablename__ = "ideas"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    date = Column(String(40), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
