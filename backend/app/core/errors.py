"""
Service error taxonomy and the single outcome-to-response mapping.

Handlers raise one of the ``ServiceError`` subclasses below; the exception
handlers registered by ``register_exception_handlers`` turn them into
``{"detail": ...}`` responses through ``ERROR_STATUS``.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base for every error a handler reports to the client."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MalformedRequestError(ServiceError):
    """Body not parseable as the expected shape, or a non-numeric id."""


class UserValidationError(ServiceError):
    """Payload parsed but breaks a field rule."""


class UserNotFoundError(ServiceError):
    def __init__(self, message: str = "User not found") -> None:
        super().__init__(message)


class StoreError(ServiceError):
    """A store statement failed; the driver error is logged, never returned."""


ERROR_STATUS: dict[type[ServiceError], int] = {
    MalformedRequestError: status.HTTP_400_BAD_REQUEST,
    UserValidationError: status.HTTP_400_BAD_REQUEST,
    UserNotFoundError: status.HTTP_404_NOT_FOUND,
    StoreError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(exc: ServiceError) -> JSONResponse:
    status_code = next(
        (code for cls, code in ERROR_STATUS.items() if isinstance(exc, cls)),
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


@contextmanager
def store_errors(message: str, action: str, user_id: int | None = None) -> Iterator[None]:
    """
    Translate store failures inside the block into StoreError(message).

    ``action`` and ``user_id`` only go to the log.
    """
    try:
        yield
    except SQLAlchemyError as e:
        if user_id is None:
            logger.error("Failed to %s: %s", action, e)
        else:
            logger.error("Failed to %s (id=%d): %s", action, user_id, e)
        raise StoreError(message) from e


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ServiceError)
    async def service_exception_handler(
        request: Request, exc: ServiceError
    ) -> JSONResponse:
        return error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Unparseable bodies are malformed input (400), not 422."""
        for err in exc.errors():
            loc = ".".join(str(l) for l in err.get("loc", []) if l != "body")
            logger.debug("Rejected request body: %s: %s", loc, err.get("msg"))
        return error_response(MalformedRequestError("Malformed request body"))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unhandled exceptions: log and return 500 with safe message."""
        logger.exception(
            "Unhandled exception on %s %s", request.method, request.url.path
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )
