"""Response envelope shared by every JSON endpoint."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """{success, message?, data?, errors?}; unset fields are left out of the body."""

    success: bool = Field(description="False for every error response")
    message: str | None = Field(default=None, description="Human-readable outcome")
    data: T | None = Field(default=None, description="Payload on success")
    errors: dict[str, str] | None = Field(
        default=None,
        description="Field name -> error message for validation, conflict and credential errors",
    )
