"""Password hashing and bearer token issue/verification."""

from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from skillboard.core.config import Settings


class InvalidTokenError(Exception):
    """Raised when a token is malformed, has a bad signature, or lacks a subject."""

    def __init__(self, message: str = "Invalid token") -> None:
        self.message = message
        super().__init__(message)


class ExpiredTokenError(InvalidTokenError):
    """Raised when a token's signature is valid but it is past its expiry."""

    def __init__(self, message: str = "Token expired") -> None:
        super().__init__(message)


def hash_password(plain_password: str, rounds: int) -> str:
    """Hash a plain-text password for storage with the given bcrypt cost (Settings.BCRYPT_ROUNDS)."""
    # bcrypt has a 72-byte limit; truncate to avoid errors.
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


class TokenService:
    """
    Issues and verifies HS256 bearer tokens bound to a user id.

    Built once from Settings at startup; holds no mutable state.
    """

    def __init__(self, settings: Settings) -> None:
        self._secret = settings.JWT_SECRET.get_secret_value()
        self._algorithm = settings.JWT_ALGORITHM
        self._lifetime = timedelta(minutes=settings.JWT_EXPIRE_MINUTES)

    def issue(self, user_id: str | int) -> str:
        """Create a signed token with sub (user id), iat and exp."""
        now = datetime.now(UTC)
        payload: dict[str, Any] = {
            "sub": str(user_id),
            "iat": now,
            "exp": now + self._lifetime,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> str:
        """
        Validate signature and expiry; return the embedded user id.
        Raises ExpiredTokenError past expiry, InvalidTokenError otherwise.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise ExpiredTokenError() from e
        except jwt.PyJWTError as e:
            raise InvalidTokenError() from e
        sub = payload.get("sub")
        if not isinstance(sub, str) or not sub:
            raise InvalidTokenError("Invalid token payload")
        return sub
