"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that domain errors
are consistently translated into API responses.
"""

from app.shared.errors.api_error import (
    UNEXPECTED_ERROR_MESSAGE,
    ApiError,
    HTTPStatusCode,
    map_error,
    new_bad_request,
    new_conflict,
    new_not_found,
    new_server_error,
)

__all__ = [
    "UNEXPECTED_ERROR_MESSAGE",
    "ApiError",
    "HTTPStatusCode",
    "map_error",
    "new_bad_request",
    "new_conflict",
    "new_not_found",
    "new_server_error",
]
