"""
Error taxonomy and HTTP error handlers.

Services raise the typed errors below; ``register_error_handlers``
maps them to JSON responses at the HTTP boundary so that handlers do
not need to translate each case by hand.  Store failures and any
other unexpected error are logged and reported as a generic 500.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


class BlogServiceError(Exception):
    """Base class for errors reported to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BlogValidationError(BlogServiceError):
    """Candidate record is malformed or misses a required field."""

    status_code = status.HTTP_400_BAD_REQUEST


class BlogNotFoundError(BlogServiceError):
    """No record exists for the identifier, or the identifier is malformed."""

    status_code = status.HTTP_404_NOT_FOUND


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(BlogServiceError)
    async def blog_service_error(request: Request, exc: BlogServiceError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    # Bodies that are not JSON objects never reach the service.
    @app.exception_handler(RequestValidationError)
    async def request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": "Malformed request body"},
        )

    @app.exception_handler(PyMongoError)
    async def store_error(request: Request, exc: PyMongoError) -> JSONResponse:
        logger.error("Store failure on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )
