"""Error taxonomy for the auth flows; mapped to HTTP responses by the app factory."""

from typing import ClassVar


class AuthError(Exception):
    """Base for every error the auth flows raise on purpose."""

    status_code: ClassVar[int] = 500
    default_message: ClassVar[str] = "Internal server error"

    def __init__(self, message: str | None = None, errors: dict[str, str] | None = None) -> None:
        self.message = message or self.default_message
        self.errors = errors
        super().__init__(self.message)


class ValidationFailedError(AuthError):
    """Field-level, user-correctable input problems."""

    status_code = 400
    default_message = "Validation failed"

    def __init__(self, errors: dict[str, str], message: str | None = None) -> None:
        super().__init__(message, errors)


class ConflictError(AuthError):
    """The identity (email) is already held by another user."""

    status_code = 409
    default_message = "User already exists"


class InvalidCredentialsError(AuthError):
    """Login failed. errors names the field at fault; the message stays generic."""

    status_code = 401
    default_message = "Invalid credentials"


class UnauthenticatedError(AuthError):
    """Missing, malformed or rejected bearer token, or its user no longer exists."""

    status_code = 401
    default_message = "Access denied. No token provided"
