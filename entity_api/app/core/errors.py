"""
Domain errors and their HTTP rendering.

Services raise :class:`ValidationError` or :class:`NotFoundError` with
a fixed, client‑facing message.  Endpoint handlers convert them into
``HTTPException`` and the handlers registered here render every HTTP
error with the same ``{"error": "<message>"}`` envelope.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INVALID_REQUEST_MESSAGE = "Solicitud inválida"


class EntityAPIError(Exception):
    """Base class for errors reported back to the client."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(EntityAPIError):
    """Missing or invalid input."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(EntityAPIError):
    """The referenced entity (or entities) does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=exc.headers,
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report payloads FastAPI could not parse as a 400 client error."""
    logger.warning("Rejected malformed request %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": INVALID_REQUEST_MESSAGE,
            "detail": jsonable_encoder(exc.errors()),
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
