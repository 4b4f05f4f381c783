"""ORM model for application users (identity, credentials, profile)."""

from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, Integer, String

from skillboard.models.base import Base

ROLES = ("user", "admin")
AVAILABILITY_STATUSES = ("available", "unavailable", "partially-available")

NAME_MAX_LEN = 100


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    """
    User account for JWT authentication and team profiles.

    email is stored trimmed and lowercased; the unique index on it is the
    source of truth for identity uniqueness.
    role: 'admin' or 'user'
    availability: 'available', 'unavailable' or 'partially-available'
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(NAME_MAX_LEN), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default="user")
    skills = Column(JSON, nullable=False, default=list)
    availability = Column(String(32), nullable=False, default="available")
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
