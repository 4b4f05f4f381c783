"""
Input validation for registration, login and profile-update payloads.

Every function takes the raw JSON object, never raises, and collects all
violations into one field -> message map.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from email_validator import EmailNotValidError, validate_email

from skillboard.models.user import AVAILABILITY_STATUSES, NAME_MAX_LEN, ROLES

PASSWORD_MIN_LEN = 6


@dataclass(frozen=True)
class ValidationResult:
    """Field-keyed error messages; an empty map means the input is valid."""

    errors: dict[str, str] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def is_email(value: str) -> bool:
    """Syntax-only email check: no DNS lookup, special-use domains such as .local allowed."""
    try:
        validate_email(value, check_deliverability=False, globally_deliverable=False)
    except EmailNotValidError:
        return False
    return True


def _is_blank(value: Any) -> bool:
    return not value or (isinstance(value, str) and not value.strip())


def _name_error(value: Any) -> str | None:
    if _is_blank(value):
        return "Name is required"
    if not isinstance(value, str):
        return "Name must be a string"
    if len(value) > NAME_MAX_LEN:
        return f"Name cannot exceed {NAME_MAX_LEN} characters"
    return None


def _email_error(value: Any) -> str | None:
    if _is_blank(value):
        return "Email is required"
    if not isinstance(value, str) or not is_email(value.strip()):
        return "Please provide a valid email address"
    return None


def _skills_error(value: Any) -> str | None:
    if not isinstance(value, list) or not all(isinstance(s, str) for s in value):
        return "Skills must be a list of strings"
    return None


def _role_error(value: Any) -> str | None:
    if value and value not in ROLES:
        return "Role must be either user or admin"
    return None


def _availability_error(value: Any) -> str | None:
    if value not in AVAILABILITY_STATUSES:
        return "Invalid availability status"
    return None


def _as_mapping(data: Any) -> Mapping[str, Any]:
    return data if isinstance(data, Mapping) else {}


def _collect(checks: dict[str, str | None]) -> ValidationResult:
    return ValidationResult({k: msg for k, msg in checks.items() if msg is not None})


def validate_registration(data: Any) -> ValidationResult:
    """name, email and password are required; role, availability and skills are optional."""
    data = _as_mapping(data)
    checks: dict[str, str | None] = {
        "name": _name_error(data.get("name")),
        "email": _email_error(data.get("email")),
    }

    password = data.get("password")
    if not password:
        checks["password"] = "Password is required"
    elif not isinstance(password, str):
        checks["password"] = "Password must be a string"
    elif len(password) < PASSWORD_MIN_LEN:
        checks["password"] = f"Password must be at least {PASSWORD_MIN_LEN} characters long"

    checks["role"] = _role_error(data.get("role"))
    if data.get("availability"):
        checks["availability"] = _availability_error(data["availability"])
    if data.get("skills") is not None:
        checks["skills"] = _skills_error(data["skills"])
    return _collect(checks)


def validate_login(data: Any) -> ValidationResult:
    """email must be well formed; password only has to be present."""
    data = _as_mapping(data)
    password = data.get("password")
    return _collect(
        {
            "email": _email_error(data.get("email")),
            "password": (
                "Password is required"
                if not password or not isinstance(password, str)
                else None
            ),
        }
    )


def validate_profile_update(data: Any) -> ValidationResult:
    """
    Partial update: each rule runs only when its key is present in the payload.
    role is not checked; the update flow never applies it.
    """
    data = _as_mapping(data)
    checks: dict[str, str | None] = {}
    if "name" in data:
        checks["name"] = _name_error(data["name"])
    if "email" in data:
        checks["email"] = _email_error(data["email"])
    if "skills" in data:
        checks["skills"] = _skills_error(data["skills"])
    if "availability" in data:
        checks["availability"] = _availability_error(data["availability"])
    return _collect(checks)
