"""Response schemas for auth endpoints."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class UserOut(BaseModel):
    """Sanitized user: every profile field, never the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    role: Literal["user", "admin"]
    skills: list[str] = Field(default_factory=list)
    availability: Literal["available", "unavailable", "partially-available"]
    created_at: datetime
    updated_at: datetime


class AuthData(BaseModel):
    """Payload for register and login."""

    token: str = Field(..., description="Bearer token; send as Authorization: Bearer <token>")
    user: UserOut


class ProfileData(BaseModel):
    """Payload for profile get and update."""

    user: UserOut
