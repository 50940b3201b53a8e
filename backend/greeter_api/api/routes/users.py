"""Users — synthesized user lookup by path id.

Invariants:
    - The id segment is taken as a raw string before any validation
    - name echoes the raw segment ("007" → "User007"), id is the parsed int
"""

from fastapi import APIRouter

from greeter_api.api.routes import READ_METHODS
from greeter_api.core.user_ids import build_user_view
from greeter_api.schemas.responses import ErrorResponse, UserView

router = APIRouter(tags=["users"])


@router.api_route(
    "/user/{user_id}/", methods=READ_METHODS, response_model=UserView,
    include_in_schema=False,
)
@router.api_route(
    "/user/{user_id}", methods=READ_METHODS, response_model=UserView,
    responses={400: {"model": ErrorResponse}},
)
async def get_user(user_id: str):
    """Return a synthesized user for a number-like id."""
    return UserView(**build_user_view(user_id))
