"""Book store protocol.

Defines the interface for the durable backing store of the book collection.
The store is the source of truth; everything else is a projection of it.

Implementations can include:
- SQLite (default)
- PostgreSQL
- Any other relational database
"""

from typing import Protocol, runtime_checkable

from book_cache.entities import BookEntity


@runtime_checkable
class BookStore(Protocol):
    """Protocol for book storage backends.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed.

    All failures are raised as ``StoreError``; implementations must not
    swallow them.
    """

    def insert(self, name: str) -> int:
        """Append a new book to the collection.

        Args:
            name: The book title, must be non-empty

        Returns:
            The store-assigned identifier of the new book

        Raises:
            StoreError: CONSTRAINT_VIOLATION for an empty name, or any I/O failure
        """
        ...

    def list_all(self) -> list[BookEntity]:
        """Return the full collection.

        Returns:
            All stored books in a stable order
        """
        ...

    def count(self) -> int:
        """Count the stored books.

        Returns:
            Number of books currently stored
        """
        ...

    def health_check(self) -> bool:
        """Check if the store is accessible.

        Returns:
            True if healthy, False otherwise
        """
        ...
