"""Register, login and profile flows: validator -> credential store -> token service."""

import logging
from dataclasses import dataclass
from typing import Any

from skillboard.core.config import Settings
from skillboard.core.exceptions import (
    ConflictError,
    InvalidCredentialsError,
    ValidationFailedError,
)
from skillboard.core.security import TokenService, hash_password, verify_password
from skillboard.models.user import User
from skillboard.services.user_store import (
    DUPLICATE_EMAIL_ERRORS,
    EMAIL_REGISTERED_MESSAGE,
    EMAIL_TAKEN_MESSAGE,
    UserStore,
    normalize_email,
)
from skillboard.services.validators import (
    validate_login,
    validate_profile_update,
    validate_registration,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthResult:
    """Token plus the user it was issued for."""

    token: str
    user: User


def register(
    data: dict[str, Any],
    store: UserStore,
    tokens: TokenService,
    settings: Settings,
) -> AuthResult:
    """
    Create a user and issue a token for it.

    Raises ValidationFailedError for bad input and ConflictError when the
    email is already registered (by the pre-check or the unique index).
    """
    result = validate_registration(data)
    if not result.is_valid:
        raise ValidationFailedError(result.errors)

    email = normalize_email(data["email"])
    if store.get_by_email(email) is not None:
        raise ConflictError(EMAIL_REGISTERED_MESSAGE, dict(DUPLICATE_EMAIL_ERRORS))

    user = store.create(
        name=data["name"].strip(),
        email=email,
        password_hash=hash_password(data["password"], rounds=settings.BCRYPT_ROUNDS),
        role=data.get("role") or "user",
        skills=data.get("skills") or [],
        availability=data.get("availability") or "available",
    )
    logger.info("User registered", extra={"user_id": user.id})
    return AuthResult(token=tokens.issue(user.id), user=user)


def login(data: dict[str, Any], store: UserStore, tokens: TokenService) -> AuthResult:
    """
    Check email and password; issue a token on success.

    Both failure cases share the message "Invalid credentials" but name
    different fields in errors (email for an unknown user, password for a
    mismatch).
    """
    result = validate_login(data)
    if not result.is_valid:
        raise ValidationFailedError(result.errors)

    user = store.get_by_email(data["email"])
    if user is None:
        logger.info("Login failed: unknown email")
        raise InvalidCredentialsError(errors={"email": "No user found with this email"})
    if not verify_password(data["password"], user.password_hash):
        logger.info("Login failed: wrong password", extra={"user_id": user.id})
        raise InvalidCredentialsError(errors={"password": "Incorrect password"})

    logger.info("Login succeeded", extra={"user_id": user.id})
    return AuthResult(token=tokens.issue(user.id), user=user)


def get_profile(user: User) -> User:
    """The auth gate already loaded the user; nothing else to do."""
    return user


def update_profile(user: User, data: dict[str, Any], store: UserStore) -> User:
    """Apply the fields present in data (name, email, skills, availability)."""
    result = validate_profile_update(data)
    if not result.is_valid:
        raise ValidationFailedError(result.errors)

    changes: dict[str, Any] = {}
    if "name" in data:
        changes["name"] = data["name"].strip()
    if "email" in data:
        email = normalize_email(data["email"])
        if email != user.email and store.email_taken(email, exclude_id=user.id):
            raise ConflictError(EMAIL_TAKEN_MESSAGE, dict(DUPLICATE_EMAIL_ERRORS))
        changes["email"] = email
    if "skills" in data:
        changes["skills"] = list(data["skills"])
    if "availability" in data:
        changes["availability"] = data["availability"]

    user = store.update(user, changes)
    logger.info("Profile updated", extra={"user_id": user.id, "fields": sorted(changes)})
    return user
