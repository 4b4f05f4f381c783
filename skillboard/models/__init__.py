"""SQLAlchemy ORM models."""

from skillboard.models.base import Base
from skillboard.models.user import AVAILABILITY_STATUSES, ROLES, User

__all__ = ["AVAILABILITY_STATUSES", "Base", "ROLES", "User"]
