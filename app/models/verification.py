"""ORM model for pending email verification attempts."""

from sqlalchemy import Column, DateTime, String

from app.models.base import Base


class Verification(Base):
    """One emailed code; removed on completion or when found expired."""

    __tablename__ = "verifications"

    id = Column(String(36), primary_key=True)
    email = Column(String(255), nullable=False, index=True)
    code = Column(String(6), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
