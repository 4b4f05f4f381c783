"""Core app configuration, database and security."""

from skillboard.core.config import Settings, get_settings
from skillboard.core.database import get_db

__all__ = ["Settings", "get_settings", "get_db"]
