"""Exception handlers that turn errors into JSON responses."""

from __future__ import annotations

import logging

from litestar import Request, Response
from litestar.exceptions import HTTPException
from litestar.status_codes import HTTP_500_INTERNAL_SERVER_ERROR

from recipebox.api.schemas.auth import ErrorResponse
from recipebox.core.exceptions import InternalError, RecipeBoxError

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Internal server error"


def app_error_handler(request: Request, exc: RecipeBoxError) -> Response[ErrorResponse]:
    """Render an application error with its own status and code."""
    if isinstance(exc, InternalError):
        return internal_error_handler(request, exc)

    return Response(
        content=ErrorResponse(message=exc.message, error=exc.error),
        status_code=exc.status_code,
    )


def http_exception_handler(request: Request, exc: HTTPException) -> Response[ErrorResponse]:
    """Render framework errors (bad JSON, unknown route) in the same shape."""
    if exc.status_code >= HTTP_500_INTERNAL_SERVER_ERROR:
        return internal_error_handler(request, exc)

    return Response(
        content=ErrorResponse(message=str(exc.detail), error="http_error"),
        status_code=exc.status_code,
    )


def internal_error_handler(request: Request, exc: Exception) -> Response[ErrorResponse]:
    """Log an unexpected failure and hide its details from the caller."""
    logger.error(
        f"Unhandled exception: {exc!r} - {request.method} {request.url.path}",
        exc_info=exc,
    )

    return Response(
        content=ErrorResponse(message=GENERIC_ERROR_MESSAGE, error=InternalError.error),
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
    )


exception_handlers = {
    RecipeBoxError: app_error_handler,
    HTTPException: http_exception_handler,
    Exception: internal_error_handler,
}
