"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /health always returns 200 if the process is up
    - timestamp is current UTC, ISO-8601 with millisecond precision and Z suffix
"""

from datetime import datetime, timezone

from fastapi import APIRouter, status

from greeter_api.api.routes import READ_METHODS
from greeter_api.schemas.responses import HealthStatus

router = APIRouter(tags=["health"])


def utc_timestamp(now: datetime | None = None) -> str:
    """Format a UTC instant as 2024-01-01T12:00:00.000Z."""
    now = now or datetime.now(timezone.utc)
    iso = now.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return iso.replace("+00:00", "Z")


@router.api_route(
    "/health/", methods=READ_METHODS, response_model=HealthStatus,
    status_code=status.HTTP_200_OK, include_in_schema=False,
)
@router.api_route(
    "/health", methods=READ_METHODS, response_model=HealthStatus,
    status_code=status.HTTP_200_OK,
)
async def health_check():
    """Basic liveness probe."""
    return HealthStatus(timestamp=utc_timestamp())
