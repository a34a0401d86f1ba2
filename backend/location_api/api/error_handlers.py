"""Error Handlers — global exception handlers for the Location API.

Invariants:
    - LocationApiError → its http_status with {"message"}; 500s use the generic message
    - Framework HTTPException (404 unknown path, 405 method) → its status with {"message"}
    - RequestValidationError → 400 {"message", "details"} (front-door body validation)
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Layered handlers: domain (LocationApiError), framework HTTP, validation (Pydantic), catch-all (Exception)
    - These cover failures OUTSIDE the dispatcher (dependency resolution, body
      parsing); inside it, RequestDispatch is the catch-all
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from location_api.core.errors import INTERNAL_ERROR_MESSAGE, LocationApiError
from location_api.core.outcomes import invalid_request

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_location_error_handler(app)
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_location_error_handler(app: FastAPI) -> None:
    """Register Location API domain/infrastructure error handler."""

    @app.exception_handler(LocationApiError)
    async def location_error_handler(request: Request, exc: LocationApiError):
        logger.error(
            f"LocationApiError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register handler for framework HTTP errors (unknown path, method)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=exc.headers,
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": INTERNAL_ERROR_MESSAGE},
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        **invalid_request().to_response(),
        "details": [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ],
    }
