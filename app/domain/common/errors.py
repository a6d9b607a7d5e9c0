"""
Domain errors shared across the CRUD application.

Every failure raised from the domain layer is classified by an ErrorKind
rather than an HTTP status. The kinds are translated into API errors at
the interface layer.
No framework imports allowed.
"""

from enum import Enum
from typing import Protocol


class ErrorKind(str, Enum):
    """Coarse classification of a domain failure."""

    NOT_FOUND = "NotFound"
    VALIDATION = "Validation"
    CONFLICT = "Conflict"
    UNEXPECTED = "Unexpected"


class DomainErrorLike(Protocol):
    """Anything exposing a kind and a human-readable message."""

    @property
    def kind(self) -> ErrorKind: ...

    @property
    def message(self) -> str: ...


class DomainError(Exception):
    """Base error for all domain errors.

    Attributes:
        kind: Classification used to pick the API status code.
        message: Human-readable description of the failure.
    """

    def __init__(self, message: str, kind: ErrorKind = ErrorKind.UNEXPECTED) -> None:
        self._message = message
        self._kind = kind
        super().__init__(message)

    @property
    def kind(self) -> ErrorKind:
        return self._kind

    @property
    def message(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self._kind!r}, message={self._message!r})"


class NotFoundError(DomainError):
    """Raised when a requested resource does not exist."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorKind.NOT_FOUND)


class ValidationError(DomainError):
    """Raised when input violates a domain rule."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorKind.VALIDATION)


class ConflictError(DomainError):
    """Raised when an operation clashes with existing state."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorKind.CONFLICT)


class UnexpectedError(DomainError):
    """Raised for failures the domain cannot classify further."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorKind.UNEXPECTED)
