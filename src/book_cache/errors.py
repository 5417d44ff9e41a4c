"""Error types shared across the service.

``StoreError`` and ``ValidationError`` propagate up to the HTTP handlers.
``CacheError`` is raised by snapshot cache backends and is always absorbed
by ``BookService``; callers never see it.
"""

from enum import Enum


class BookServiceError(Exception):
    """Base class for all service errors."""


class StoreErrorKind(str, Enum):
    """Category of a store failure."""

    CONNECTION_FAILURE = "connection_failure"
    CONSTRAINT_VIOLATION = "constraint_violation"
    UNAVAILABLE = "unavailable"


class StoreError(BookServiceError):
    """Raised when the book store cannot complete an operation.

    Attributes:
        kind: The failure category
    """

    def __init__(self, kind: StoreErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind

    def __str__(self) -> str:
        return f"{self.kind.value}: {super().__str__()}"


class ValidationError(BookServiceError):
    """Raised when a request carries invalid input (e.g. an empty name)."""


class CacheError(BookServiceError):
    """Raised by a snapshot cache backend when it fails or times out."""
