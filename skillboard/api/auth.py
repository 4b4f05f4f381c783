"""Register, login and profile endpoints, plus the bearer-token gate (get_current_user)."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Header, status

from skillboard.api.deps import get_app_settings, get_token_service, get_user_store
from skillboard.core.config import Settings
from skillboard.core.exceptions import UnauthenticatedError
from skillboard.core.security import InvalidTokenError, TokenService
from skillboard.models.user import User
from skillboard.schemas.auth import AuthData, ProfileData, UserOut
from skillboard.schemas.common import ApiResponse
from skillboard.services import auth_flows
from skillboard.services.user_store import UserStore

router = APIRouter()

JsonObject = Annotated[dict[str, Any] | None, Body()]


def get_current_user(
    store: Annotated[UserStore, Depends(get_user_store)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
    authorization: Annotated[str | None, Header()] = None,
) -> User:
    """Dependency: require a valid Bearer token and return its user. Raises 401 otherwise."""
    if authorization is None or not authorization.strip():
        raise UnauthenticatedError("Access denied. No token provided")

    scheme, _, token = authorization.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        raise UnauthenticatedError("Access denied. Malformed authorization header")

    try:
        sub = tokens.verify(token)
    except InvalidTokenError:
        # Expired and bad-signature tokens are reported the same way.
        raise UnauthenticatedError("Invalid token")

    try:
        user_id = int(sub)
    except ValueError:
        raise UnauthenticatedError("Invalid token. User not found")
    user = store.get_by_id(user_id)
    if user is None:
        raise UnauthenticatedError("Invalid token. User not found")
    return user


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[AuthData],
    response_model_exclude_none=True,
)
def register(
    store: Annotated[UserStore, Depends(get_user_store)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
    settings: Annotated[Settings, Depends(get_app_settings)],
    body: JsonObject = None,
) -> ApiResponse[AuthData]:
    """Create an account; returns a bearer token and the new user."""
    result = auth_flows.register(body or {}, store, tokens, settings)
    return ApiResponse[AuthData](
        success=True,
        message="User registered successfully",
        data=AuthData(token=result.token, user=UserOut.model_validate(result.user)),
    )


@router.post("/login", response_model=ApiResponse[AuthData], response_model_exclude_none=True)
def login(
    store: Annotated[UserStore, Depends(get_user_store)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
    body: JsonObject = None,
) -> ApiResponse[AuthData]:
    """
    Authenticate with email and password; returns a bearer token.
    Include the token in the Authorization header as: Bearer <token>
    """
    result = auth_flows.login(body or {}, store, tokens)
    return ApiResponse[AuthData](
        success=True,
        message="Login successful",
        data=AuthData(token=result.token, user=UserOut.model_validate(result.user)),
    )


@router.get("/profile", response_model=ApiResponse[ProfileData], response_model_exclude_none=True)
def get_profile(
    current_user: Annotated[User, Depends(get_current_user)],
) -> ApiResponse[ProfileData]:
    user = auth_flows.get_profile(current_user)
    return ApiResponse[ProfileData](success=True, data=ProfileData(user=UserOut.model_validate(user)))


@router.put("/profile", response_model=ApiResponse[ProfileData], response_model_exclude_none=True)
def update_profile(
    current_user: Annotated[User, Depends(get_current_user)],
    store: Annotated[UserStore, Depends(get_user_store)],
    body: JsonObject = None,
) -> ApiResponse[ProfileData]:
    """Partial update of name, email, skills and availability."""
    user = auth_flows.update_profile(current_user, body or {}, store)
    return ApiResponse[ProfileData](
        success=True,
        message="Profile updated successfully",
        data=ProfileData(user=UserOut.model_validate(user)),
    )
