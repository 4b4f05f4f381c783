"""Dependencies exposing the objects create_app() builds once at startup."""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from skillboard.core.config import Settings
from skillboard.core.database import get_db
from skillboard.core.security import TokenService
from skillboard.services.user_store import UserStore


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_user_store(db: Annotated[Session, Depends(get_db)]) -> UserStore:
    """Credential store bound to this request's session."""
    return UserStore(db)
