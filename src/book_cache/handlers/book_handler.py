"""HTTP handlers for book operations.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes and error responses.
"""

import logging

from fastapi import HTTPException, status

from book_cache.dto import (
    BookCountResponse,
    BookCreateResponse,
    BookItem,
    CreateBookRequest,
    HealthCheckResponse,
    SeedResponse,
)
from book_cache.errors import StoreError, StoreErrorKind, ValidationError
from book_cache.services import BookService

logger = logging.getLogger(__name__)


def _store_error_to_http(e: StoreError, action: str) -> HTTPException:
    if e.kind is StoreErrorKind.CONSTRAINT_VIOLATION:
        code = status.HTTP_400_BAD_REQUEST
    else:
        code = status.HTTP_503_SERVICE_UNAVAILABLE
    return HTTPException(status_code=code, detail=f"Failed to {action}: {e}")


class BookHandler:
    """HTTP handlers for book operations.

    This handler delegates business logic to BookService
    and handles HTTP-specific concerns like:
    - Converting entities to DTOs
    - Mapping StoreError / ValidationError to status codes

    The methods are synchronous; FastAPI runs the routes calling them in its
    threadpool, one worker thread per request.

    Example:
        ```python
        handler = BookHandler(book_service=service)

        @app.get("/api/books", response_model=list[BookItem])
        def list_books():
            return handler.list_books()
        ```
    """

    def __init__(self, book_service: BookService) -> None:
        """Initialize the book handler.

        Args:
            book_service: The book service for business logic (required).
        """
        self._books = book_service

    def list_books(self) -> list[BookItem]:
        """Handle GET /api/books requests.

        Returns:
            The full collection

        Raises:
            HTTPException: 503 if the store is unavailable
        """
        try:
            books = self._books.get_all()
        except StoreError as e:
            raise _store_error_to_http(e, "list books") from e

        return [BookItem(id=book.id, name=book.name) for book in books]

    def add_book(self, request: CreateBookRequest) -> BookCreateResponse:
        """Handle POST /api/books requests.

        Args:
            request: The create book request DTO

        Returns:
            BookCreateResponse with the new id

        Raises:
            HTTPException: 400 for an invalid name, 503 if the store is unavailable
        """
        try:
            book_id = self._books.insert(request.name)
        except ValidationError as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(e),
            ) from e
        except StoreError as e:
            raise _store_error_to_http(e, "add book") from e

        return BookCreateResponse(success=True, id=book_id, message="Book Added")

    def seed(self) -> SeedResponse:
        """Handle POST /api/books/seed requests."""
        try:
            ids = self._books.seed()
        except StoreError as e:
            raise _store_error_to_http(e, "seed data") from e

        return SeedResponse(success=True, ids=ids, message="Data Seeded")

    def count_books(self) -> BookCountResponse:
        """Handle GET /api/books/count requests."""
        try:
            total = self._books.count()
        except StoreError as e:
            raise _store_error_to_http(e, "count books") from e

        return BookCountResponse(count=total, message=f"Total Books: {total}")

    def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests.

        The service is healthy as long as the store is reachable; a
        down cache only degrades performance.

        Raises:
            HTTPException: 503 if the store is unreachable
        """
        health = self._books.is_healthy()
        if not health["cache"]:
            logger.warning("Cache backend unreachable, serving from store only")

        response = HealthCheckResponse(
            status="healthy" if health["store"] else "unhealthy",
            store_healthy=health["store"],
            cache_healthy=health["cache"],
        )
        if not health["store"]:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail=response.model_dump(),
            )
        return response
