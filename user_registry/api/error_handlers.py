"""Error Handlers — global exception handlers for the User Registry API.

Invariants:
    - UserRegistryError → exc.http_status with exc.to_response():
      JSON list for validation failures, plain text otherwise
    - RequestValidationError (malformed JSON, bad dates, bad ids) → 400 JSON list
      of "<field>: <message>" strings
    - Exception (catch-all) → 500 with the failure's message as plain text

Design Decisions:
    - Three-layer handler: domain (UserRegistryError), validation (Pydantic), catch-all
    - Extracted from main.py: main only wires, handlers live here
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from user_registry.core.errors import UserRegistryError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(UserRegistryError)
    async def user_registry_error_handler(
        request: Request, exc: UserRegistryError,
    ) -> Response:
        """Handle all domain/infrastructure errors."""
        logger.warning(
            f"{exc.code}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "status_code": exc.http_status,
            },
        )
        return build_error_response(exc)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ) -> Response:
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=format_request_errors(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(
        request: Request, exc: Exception,
    ) -> Response:
        """Catch-all — surfaces the raw message."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return PlainTextResponse(
            str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


def build_error_response(exc: UserRegistryError) -> Response:
    body = exc.to_response()
    if isinstance(body, list):
        return JSONResponse(status_code=exc.http_status, content=body)
    return PlainTextResponse(body, status_code=exc.http_status)


def format_request_errors(exc: RequestValidationError) -> list[str]:
    """Flatten Pydantic errors to "<field>: <message>" strings."""
    messages = []
    for e in exc.errors():
        # loc[0] is the source ("body", "query", "path")
        loc = tuple(e.get("loc") or ("request",))
        field = ".".join(str(part) for part in loc[1:]) or str(loc[0])
        messages.append(f"{field}: {e['msg']}")
    return messages
