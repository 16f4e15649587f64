"""Global exception handlers that map structured errors to HTTP responses."""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.errors import (
    InternalServerError,
    MethodNotAllowedError,
    NotFoundError,
    StructuredError,
    ValidationError,
)
from app.schemas.error import ErrorResponse

logger = logging.getLogger(__name__)


def error_response(error: StructuredError) -> JSONResponse:
    """Return the wire form of a structured error with its status code."""
    body = ErrorResponse.model_validate(error.serialize())
    return JSONResponse(
        status_code=error.status_code,
        content=body.model_dump(mode="json", exclude_none=True),
    )


def _log(request: Request, level: int, error: StructuredError) -> None:
    request.app.state.structured_logger.log(level, error.serialize())


def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    _log(request, logging.INFO, exc)
    return error_response(exc)


def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        error: StructuredError = MethodNotAllowedError()
    elif exc.status_code == status.HTTP_404_NOT_FOUND:
        error = NotFoundError()
    else:
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
            headers=exc.headers,
        )
    _log(request, logging.INFO, error)
    response = error_response(error)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unexpected errors. Never exposes internals."""
    error = InternalServerError()
    logger.error(
        "Unexpected error %s (error_id=%s)", type(exc).__name__, error.error_id, exc_info=exc
    )
    _log(request, logging.ERROR, error)
    return error_response(error)


def register_exception_handlers(app):
    """Register structured error handlers on the FastAPI app."""
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
