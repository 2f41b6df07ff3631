"""Ship registry error types and their FastAPI exception handlers.

Service code raises :class:`ValidationError` or :class:`NotFoundError`;
the handlers registered by :func:`register_exception_handlers` turn them
into ``{"detail": ...}`` JSON responses with the matching status code.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ShipRegistryError(Exception):
    """Base class for errors reported back to the client."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ShipRegistryError):
    """Malformed input: bad field values, id shape, order or query parameter."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ShipRegistryError):
    """A well-formed id that is absent from the store."""

    status_code = status.HTTP_404_NOT_FOUND


async def handle_registry_error(request: Request, exc: ShipRegistryError) -> JSONResponse:
    """Render a ShipRegistryError as a JSON error body."""
    logger.info(
        "%s %s rejected with %d: %s",
        request.method,
        request.url.path,
        exc.status_code,
        exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report body deserialisation failures as 400 rather than 422."""
    logger.info("%s %s has an unreadable body: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Malformed ship body"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the registry's exception handlers to the application."""
    app.add_exception_handler(ShipRegistryError, handle_registry_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)  # type: ignore[arg-type]
