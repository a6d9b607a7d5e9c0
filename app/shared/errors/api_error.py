"""
API errors shaped for HTTP transport.

An ApiError pairs an HTTP status code with a message. Domain errors are
translated into ApiErrors by map_error before they reach the client.
"""

from enum import IntEnum

from app.domain.common.errors import DomainErrorLike, ErrorKind

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


class HTTPStatusCode(IntEnum):
    """HTTP status codes an ApiError may carry."""

    BAD_REQUEST = 400
    AUTHENTICATION = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    CONFLICT = 409
    SERVER_ERROR = 500


class ApiError(Exception):
    """An error with an associated HTTP status code and message.

    Instances are read-only values: two errors with the same status code
    and message compare equal.
    """

    def __init__(self, status_code: HTTPStatusCode, message: str) -> None:
        self._status_code = HTTPStatusCode(status_code)
        self._message = message
        super().__init__(message)

    @property
    def status_code(self) -> int:
        """HTTP status code associated with the error."""
        return int(self._status_code)

    @property
    def message(self) -> str:
        return self._message

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"ApiError(status_code={self.status_code}, message={self._message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ApiError):
            return NotImplemented
        return (self._status_code, self._message) == (other._status_code, other._message)

    def __hash__(self) -> int:
        return hash((self._status_code, self._message))

    def __reduce__(self):
        return (type(self), (self._status_code, self._message))


def new_bad_request(message: str) -> ApiError:
    """Create a 400 Bad Request error."""
    return ApiError(HTTPStatusCode.BAD_REQUEST, message)


def new_conflict(message: str) -> ApiError:
    """Create a 409 Conflict error."""
    return ApiError(HTTPStatusCode.CONFLICT, message)


def new_server_error(message: str) -> ApiError:
    """Create a 500 Internal Server Error."""
    return ApiError(HTTPStatusCode.SERVER_ERROR, message)


def new_not_found(message: str) -> ApiError:
    """Create a 404 Not Found error."""
    return ApiError(HTTPStatusCode.NOT_FOUND, message)


def map_error(err: DomainErrorLike) -> ApiError:
    """Convert a domain error into the matching API error.

    Unrecognized kinds become a 500 with a generic message so that
    internal details never reach the client.

    Args:
        err: The domain error to translate.

    Returns:
        The API error carrying the status code for ``err.kind``.
    """
    match err.kind:
        case ErrorKind.NOT_FOUND:
            return new_not_found(err.message)
        case ErrorKind.VALIDATION:
            return new_bad_request(err.message)
        case ErrorKind.CONFLICT:
            return new_conflict(err.message)
        case ErrorKind.UNEXPECTED:
            return new_server_error(err.message)
        case _:
            return new_server_error(UNEXPECTED_ERROR_MESSAGE)
