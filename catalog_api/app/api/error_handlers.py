"""
Exception handlers translating errors into HTTP responses.

Every error body is the ``{"message": ...}`` envelope.  Catalog errors
map to fixed status codes, request validation errors become 400 with
the first violated rule's message and anything else becomes a 500.
"""

import logging
from contextlib import contextmanager
from typing import Dict, Iterator, Type

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from catalog_api.app.core.exceptions import (
    CatalogError,
    CategoryReferenceError,
    ConflictError,
    InternalError,
    NotFoundError,
    ValidationFailure,
)
from catalog_api.app.schemas.rules import first_error_message

logger = logging.getLogger(__name__)

STATUS_BY_ERROR: Dict[Type[CatalogError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    ValidationFailure: status.HTTP_400_BAD_REQUEST,
    CategoryReferenceError: status.HTTP_400_BAD_REQUEST,
    InternalError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(exc: CatalogError) -> int:
    for error_type in type(exc).__mro__:
        if error_type in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[error_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def message_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


@contextmanager
def unexpected_errors(action: str) -> Iterator[None]:
    """Turn any non-catalog exception raised in the block into ``InternalError``.

    ``action`` completes the message, e.g. ``"registering category"``
    yields ``"Error registering category: <detail>"``.
    """
    try:
        yield
    except CatalogError:
        raise
    except Exception as e:
        raise InternalError(f"Error {action}: {e}") from e


def register_error_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app."""

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
        status_code = status_for(exc)
        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                "%s %s failed: %s", request.method, request.url.path, exc.message,
                exc_info=exc.__cause__ or exc,
            )
        else:
            logger.warning(
                "%s %s -> %s: %s", request.method, request.url.path, status_code, exc.message
            )
        return message_response(status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        message = first_error_message(exc.errors())
        logger.warning("Validation error on %s: %s", request.url.path, message)
        return message_response(status.HTTP_400_BAD_REQUEST, message)

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled exception on %s: %s", request.url.path, exc, exc_info=exc
        )
        return message_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "An unexpected error occurred"
        )
