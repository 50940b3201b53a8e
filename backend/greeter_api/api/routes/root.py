"""Root — static plain-text greeting."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from greeter_api.api.routes import READ_METHODS
from greeter_api.core.greeting import ROOT_GREETING

router = APIRouter(tags=["greeting"])


@router.api_route("/", methods=READ_METHODS, response_class=PlainTextResponse)
async def root():
    return ROOT_GREETING
