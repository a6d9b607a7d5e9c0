"""
Centralized error handlers for FastAPI.

Maps domain errors to HTTP responses through map_error.
No stack traces or internal details are exposed to clients.
All error responses share the {"error": ...} shape.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.domain.common.errors import DomainError
from app.shared.errors.api_error import (
    UNEXPECTED_ERROR_MESSAGE,
    ApiError,
    HTTPStatusCode,
    map_error,
)

logger = logging.getLogger(__name__)


def _error_response(status_code: int, error: str) -> JSONResponse:
    """Build a consistent JSON error response."""
    return JSONResponse(status_code=status_code, content={"error": error})


def _api_error_response(api_error: ApiError) -> JSONResponse:
    return _error_response(api_error.status_code, api_error.message)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(DomainError)
    async def handle_domain_error(
        _request: Request, exc: DomainError
    ) -> JSONResponse:
        """Translate a domain error into its API error."""
        api_error = map_error(exc)
        if api_error.status_code >= HTTPStatusCode.SERVER_ERROR:
            logger.error("Domain error (%s): %s", exc.kind, exc.message)
        else:
            logger.warning("Domain error (%s): %s", exc.kind, exc.message)
        return _api_error_response(api_error)

    @app.exception_handler(ApiError)
    async def handle_api_error(
        _request: Request, exc: ApiError
    ) -> JSONResponse:
        """Handle API errors raised directly by routes."""
        logger.warning("API error %d: %s", exc.status_code, exc.message)
        return _api_error_response(exc)

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTPStatusCode.SERVER_ERROR, UNEXPECTED_ERROR_MESSAGE)
