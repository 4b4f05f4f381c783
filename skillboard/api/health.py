"""Liveness endpoint."""

from datetime import datetime, timezone

from fastapi import APIRouter

from skillboard.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health() -> HealthResponse:
    """
    Return service status and server time.
    Used by load balancers and monitoring; does not touch the database.
    """
    return HealthResponse(status="OK", timestamp=datetime.now(timezone.utc))
