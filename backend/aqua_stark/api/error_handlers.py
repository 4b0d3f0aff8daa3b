"""Error Handlers: global exception handlers that keep the envelope universal.

Invariants:
    - AquaStarkError -> its own {type, message, code} record
    - RequestValidationError -> ValidationError (400) naming the offending fields
    - Starlette HTTPException (unknown route, wrong method) -> NotFoundError for 404,
      ValidationError for other 4xx, InternalError otherwise
    - Exception (catch-all) -> build_error classification

Design Decisions:
    - Four-layer handler: domain, request validation, routing, catch-all
    - Extracted from main.py to keep the composition root small
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from aqua_stark.api.envelope import respond
from aqua_stark.core.errors import (
    AquaStarkError, InternalError, NotFoundError, ValidationError,
)
from aqua_stark.core.responses import build_error

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(AquaStarkError)
    async def domain_error_handler(request: Request, exc: AquaStarkError):
        """Taxonomy errors raised outside a controller's guarded block."""
        return respond(build_error(exc), path=request.url.path)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Request body / query failed Pydantic validation."""
        return respond(
            build_error(ValidationError(_describe_validation_errors(exc))),
            path=request.url.path,
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            error = NotFoundError(
                f"Route {request.method} {request.url.path} not found",
            )
        elif exc.status_code < 500:
            error = ValidationError(str(exc.detail))
        else:
            error = InternalError(str(exc.detail))
        return respond(build_error(error), path=request.url.path)


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return respond(build_error(exc), path=request.url.path)


def _describe_validation_errors(exc: RequestValidationError) -> str:
    """'Invalid request data: body.fish_ids.0: Input should be a valid integer; ...'"""
    details = "; ".join(
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in exc.errors()
    )
    return f"Invalid request data: {details}" if details else "Invalid request data"
