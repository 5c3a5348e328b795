"""
Error types shared by repositories, services and the HTTP layer.

Every failure a service can report is a subclass of ``ServiceError``
carrying a human‑readable ``message``, an optional ``detail`` with the
underlying cause and the HTTP status code the API responds with.
``register_exception_handlers`` installs the FastAPI handlers that
turn these exceptions (and request validation failures) into JSON
responses of the form ``{"message": ..., "error": ...}``.
"""

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, detail: Any = None, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ServiceError):
    """Missing or malformed required input."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ServiceError):
    """No record matches the requested id."""

    status_code = status.HTTP_404_NOT_FOUND


class StorageError(ServiceError):
    """A database operation failed."""


class FileIoError(ServiceError):
    """Writing or deleting an uploaded file failed."""


class ExternalServiceError(ServiceError):
    """The mailing‑list provider rejected the request or was unreachable."""

    status_code = status.HTTP_502_BAD_GATEWAY


def _error_body(message: str, detail: Any = None) -> dict:
    body = {"message": message}
    if detail is not None:
        body["error"] = jsonable_encoder(detail)
    return body


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s (%s)", request.method, request.url.path, exc.message, exc.detail)
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc.message, exc.detail))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Missing required fields are a client error, reported as 400 rather
    # than FastAPI's default 422.
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body("Invalid request", exc.errors()),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error handlers to ``app``."""
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
