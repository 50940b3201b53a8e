"""Error Handlers — global exception handlers for the Greeter API.

Invariants:
    - GreeterError → its own status with {"error": message}
    - Unmatched routes (404, and 405 for a known path) → 404 "Route not found"
    - RequestValidationError → 400 with the uniform envelope
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Layered handlers: domain (GreeterError), routing (HTTPException),
      validation (Pydantic), catch-all (Exception)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from greeter_api.core.errors import GreeterError, RouteNotFoundError

logger = logging.getLogger(__name__)

_UNMATCHED_ROUTE_STATUSES = (
    status.HTTP_404_NOT_FOUND,
    status.HTTP_405_METHOD_NOT_ALLOWED,
)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_greeter_error_handler(app)
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _greeter_error_response(request: Request, exc: GreeterError) -> JSONResponse:
    logger.info(
        f"GreeterError: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "method": request.method,
            "status_code": exc.http_status,
        },
    )
    return JSONResponse(
        status_code=exc.http_status, content=exc.to_response(),
    )


def _register_greeter_error_handler(app: FastAPI) -> None:
    """Register domain error handler."""

    @app.exception_handler(GreeterError)
    async def greeter_error_handler(request: Request, exc: GreeterError):
        """Handle all Greeter domain errors."""
        return _greeter_error_response(request, exc)


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing/HTTP error handler."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """Map unmatched routes to the not-found contract."""
        if exc.status_code in _UNMATCHED_ROUTE_STATUSES:
            return _greeter_error_response(
                request, RouteNotFoundError(request.method, request.url.path),
            )
        logger.warning(
            f"HTTP error on {request.url.path}: {exc.detail}",
            extra={"status_code": exc.status_code},
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request data"},
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )
