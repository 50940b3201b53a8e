"""Calculate — four-operation arithmetic over a JSON body.

Invariants:
    - The body is read raw; FastAPI body validation (422) never runs here
    - Non-JSON content types and empty bodies count as an empty object
    - A JSON body that fails to parse → 400 "Malformed JSON body"
    - NaN/Infinity literals are not JSON and fail to parse
    - Every JSON number parses as a double, integers of any length included
"""

import json
from typing import Any

from fastapi import APIRouter, Request

from greeter_api.core.calculator import evaluate
from greeter_api.core.errors import MalformedBodyError
from greeter_api.schemas.responses import CalculationResponse, ErrorResponse

router = APIRouter(tags=["calculator"])


def _is_json_media_type(content_type: str) -> bool:
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant: {name}")


async def read_json_body(request: Request) -> Any:
    """Parse the request body as JSON, or {} when it is not declared JSON."""
    if not _is_json_media_type(request.headers.get("content-type", "")):
        return {}
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        return json.loads(
            raw, parse_int=float, parse_constant=_reject_constant,
        )
    except ValueError:
        raise MalformedBodyError() from None


@router.post(
    "/calculate/", response_model=CalculationResponse,
    include_in_schema=False,
)
@router.post(
    "/calculate", response_model=CalculationResponse,
    responses={400: {"model": ErrorResponse}},
)
async def calculate(request: Request):
    """Apply add, subtract, multiply, or divide to a and b."""
    body = await read_json_body(request)
    return CalculationResponse(result=evaluate(body))
