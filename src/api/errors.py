"""
Global exception handlers.

The only place where a failure is turned into a response: every non-2xx answer uses the ErrorResponse envelope.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.models import ErrorResponse
from src.core.exceptions import (
    GameServiceError,
    NotFoundError,
    RequestValidationFailedError,
)

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."


def error_response(
    status_code: int, message: str, errors: dict[str, list[str]] | None = None
) -> JSONResponse:
    envelope = ErrorResponse(message=message, errors=errors)
    return JSONResponse(
        status_code=status_code, content=envelope.model_dump(exclude_none=True)
    )


async def service_error_handler(request: Request, exc: GameServiceError) -> JSONResponse:
    """BadRequestError -> 400, NotFoundError -> 404 (status carried by the exception)."""
    kind = "Resource not found" if isinstance(exc, NotFoundError) else "Bad request"
    logger.warning(f"{kind} on {request.method} {request.url.path}: {exc.message}")

    errors = exc.errors_by_field() if isinstance(exc, RequestValidationFailedError) else None
    return error_response(exc.http_status, exc.message, errors)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Path constraints and malformed bodies, rejected by FastAPI before the route runs."""
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        errors.setdefault(location, []).append(error["msg"])

    message = "; ".join(f"{location}: {'; '.join(msgs)}" for location, msgs in errors.items())
    logger.warning(f"Bad request on {request.method} {request.url.path}: {message}")
    return error_response(status.HTTP_400_BAD_REQUEST, message, errors)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Routing level errors raised by Starlette itself (unknown path, wrong method)."""
    logger.warning(f"HTTP {exc.status_code} on {request.method} {request.url.path}: {exc.detail}")
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all. Details go to the log, never to the caller."""
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc}",
        exc_info=exc,
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, UNEXPECTED_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(GameServiceError, service_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)
