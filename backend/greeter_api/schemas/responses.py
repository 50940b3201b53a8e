"""Response Schemas — public-facing JSON shapes for every route.

Invariants:
    - ErrorResponse is the single shape for every 4xx body
    - UserView.id is None when the raw id has no leading integer
    - CalculationResponse.result keeps int vs float as computed (smart union)
"""

from typing import Literal

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Uniform error envelope."""
    error: str


class GreetingResponse(BaseModel):
    message: str


class UserView(BaseModel):
    """Synthesized user — not backed by storage."""
    id: int | None
    name: str


class CalculationResponse(BaseModel):
    result: int | float | None


class HealthStatus(BaseModel):
    """Liveness payload, generated fresh per call."""
    status: Literal["healthy"] = "healthy"
    timestamp: str
