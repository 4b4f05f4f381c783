"""Pydantic request/response schemas."""

from skillboard.schemas.auth import AuthData, ProfileData, UserOut
from skillboard.schemas.common import ApiResponse
from skillboard.schemas.health import HealthResponse

__all__ = [
    "ApiResponse",
    "AuthData",
    "HealthResponse",
    "ProfileData",
    "UserOut",
]
