"""Credential store: user lookups and writes over a SQLAlchemy session."""

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from skillboard.core.exceptions import ConflictError
from skillboard.models.user import User, utcnow

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_ERRORS = {"email": "Email already registered"}
EMAIL_REGISTERED_MESSAGE = "User already exists with this email"
EMAIL_TAKEN_MESSAGE = "Email already taken by another user"


def normalize_email(email: str) -> str:
    return email.strip().lower()


class UserStore:
    """
    Reads and writes User rows through one session.

    The unique index on users.email decides uniqueness. Callers may pre-check
    with email_taken(), but a violation at commit time is still reported as
    ConflictError.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_id(self, user_id: int) -> User | None:
        return self.session.get(User, user_id)

    def get_by_email(self, email: str) -> User | None:
        return (
            self.session.query(User)
            .filter(User.email == normalize_email(email))
            .first()
        )

    def email_taken(self, email: str, exclude_id: int | None = None) -> bool:
        """True if a user other than exclude_id holds email."""
        query = self.session.query(User.id).filter(User.email == normalize_email(email))
        if exclude_id is not None:
            query = query.filter(User.id != exclude_id)
        return query.first() is not None

    def create(
        self,
        *,
        name: str,
        email: str,
        password_hash: str,
        role: str = "user",
        skills: list[str] | None = None,
        availability: str = "available",
    ) -> User:
        user = User(
            name=name,
            email=normalize_email(email),
            password_hash=password_hash,
            role=role,
            skills=list(skills or []),
            availability=availability,
        )
        self.session.add(user)
        self._commit(EMAIL_REGISTERED_MESSAGE, email=user.email)
        self.session.refresh(user)
        return user

    def update(self, user: User, changes: Mapping[str, Any]) -> User:
        """Apply changes (column name -> value) to user and persist them; always bumps updated_at."""
        for key, value in changes.items():
            setattr(user, key, value)
        user.updated_at = utcnow()
        self._commit(EMAIL_TAKEN_MESSAGE, email=user.email)
        self.session.refresh(user)
        return user

    def _commit(self, conflict_message: str, email: str) -> None:
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            logger.warning("Unique email constraint rejected write for %s", email)
            raise ConflictError(conflict_message, dict(DUPLICATE_EMAIL_ERRORS)) from e
