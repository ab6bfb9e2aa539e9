"""
Error taxonomy and the handlers that turn it into HTTP responses.

Services raise the exceptions defined here; endpoints let them
propagate.  ``register_exception_handlers`` maps each class to a status
code with a fixed, minimal JSON body so that no internal detail (file
paths, SQLite messages) ever reaches the client.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class PartyApiError(Exception):
    """Base class for all application errors."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Internal server error"


class ValidationError(PartyApiError):
    """Registration input is missing or malformed."""

    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Invalid registration"


class DuplicateNickError(ValidationError):
    """The nick is already taken by another visitor."""

    detail = "Nick already registered"


class AuthorizationError(PartyApiError):
    """Missing or incorrect admin credential."""

    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "Not authenticated"


class NotFoundError(PartyApiError):
    status_code = status.HTTP_404_NOT_FOUND
    detail = "Visitor not found"


class StorageError(PartyApiError):
    """The database could not complete the operation."""


async def _party_api_error_handler(request: Request, exc: PartyApiError) -> JSONResponse:
    headers = None
    if isinstance(exc, StorageError):
        logger.error(
            "Storage failure on %s %s",
            request.method,
            request.url.path,
            exc_info=(type(exc), exc, exc.__traceback__),
        )
    elif isinstance(exc, AuthorizationError):
        headers = {"WWW-Authenticate": "Bearer"}
    else:
        logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=headers,
    )


async def _request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.debug("Malformed request on %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Malformed request"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error handlers on ``app``."""
    app.add_exception_handler(PartyApiError, _party_api_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_error_handler)
