"""
Exception handlers - Map domain errors to HTTP responses.

Every handled error is rendered as an ErrorResponse body. Request
validation keeps FastAPI's default 422 response.
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from src.api.models import ErrorResponse
from src.domain.exceptions import (
    EmailAlreadyExists,
    InvalidUser,
    UserAlreadyExists,
    UserNotFound,
)

logger = logging.getLogger(__name__)


def error_response(request: Request, status_code: int, message: str) -> JSONResponse:
    """Build a JSON ErrorResponse for the current request path."""
    body = ErrorResponse(
        status=status_code,
        error=HTTPStatus(status_code).phrase,
        message=message,
        path=request.url.path,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def handle_user_not_found(request: Request, exc: UserNotFound) -> JSONResponse:
    logger.warning("Resource not found on path %s: %s", request.url.path, exc)
    return error_response(request, status.HTTP_404_NOT_FOUND, str(exc))


async def handle_conflict(
    request: Request, exc: EmailAlreadyExists | UserAlreadyExists
) -> JSONResponse:
    logger.warning("Duplicate resource on path %s: %s", request.url.path, exc)
    return error_response(request, status.HTTP_409_CONFLICT, str(exc))


async def handle_invalid_user(request: Request, exc: InvalidUser) -> JSONResponse:
    logger.warning("Invalid user on path %s: %s", request.url.path, exc)
    return error_response(request, 422, str(exc))


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unexpected error on path %s", request.url.path, exc_info=exc)
    return error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred. Please try again later.",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the domain error handlers to ``app``."""
    app.add_exception_handler(UserNotFound, handle_user_not_found)
    app.add_exception_handler(EmailAlreadyExists, handle_conflict)
    app.add_exception_handler(UserAlreadyExists, handle_conflict)
    app.add_exception_handler(InvalidUser, handle_invalid_user)
    app.add_exception_handler(Exception, handle_unexpected)
