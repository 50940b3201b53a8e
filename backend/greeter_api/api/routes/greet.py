"""Greet — query-parameter greeter.

Invariants:
    - Missing or empty name → 400 "Name parameter is required"
    - Name is interpolated verbatim, no sanitization
"""

from fastapi import APIRouter, Query

from greeter_api.api.routes import READ_METHODS
from greeter_api.core.greeting import greet as build_greeting
from greeter_api.schemas.responses import ErrorResponse, GreetingResponse

router = APIRouter(tags=["greeting"])


@router.api_route(
    "/greet/", methods=READ_METHODS, response_model=GreetingResponse,
    include_in_schema=False,
)
@router.api_route(
    "/greet", methods=READ_METHODS, response_model=GreetingResponse,
    responses={400: {"model": ErrorResponse}},
)
async def greet(names: list[str] = Query(default=[], alias="name")):
    """Greet the caller by the name query parameter."""
    return GreetingResponse(message=build_greeting(names))
