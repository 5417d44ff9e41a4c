"""SQLite implementation of BookStore.

Stores the collection in a single ``books`` table created by
``SchemaBootstrapper``. Satisfies the BookStore protocol.
"""

import logging
import sqlite3
from pathlib import Path

from book_cache.db import connect, transaction
from book_cache.entities import BookEntity
from book_cache.errors import StoreError, StoreErrorKind

logger = logging.getLogger(__name__)


class SqliteBookRepository:
    """SQLite implementation of the book store.

    This class satisfies the BookStore protocol through structural
    typing - no explicit inheritance needed.

    Each operation opens its own connection, so one repository instance can
    be shared by concurrent requests.
    """

    def __init__(self, database_path: Path, timeout: float = 5.0) -> None:
        """Initialize the SQLite repository.

        Args:
            database_path: Path to the SQLite database file
            timeout: Seconds to wait on a locked database
        """
        self._database_path = Path(database_path)
        self._timeout = timeout

    @classmethod
    def create(cls, database_path: Path, timeout: float = 5.0) -> "SqliteBookRepository":
        """Factory method to create SqliteBookRepository.

        Args:
            database_path: Path to the SQLite database file
            timeout: Seconds to wait on a locked database

        Returns:
            Configured SqliteBookRepository
        """
        return cls(database_path=database_path, timeout=timeout)

    def insert(self, name: str) -> int:
        """Insert a book and return its new id.

        Args:
            name: The book title

        Returns:
            The store-assigned identifier

        Raises:
            StoreError: CONSTRAINT_VIOLATION for an empty name, other kinds on I/O failure
        """
        if not name:
            raise StoreError(StoreErrorKind.CONSTRAINT_VIOLATION, "Book name must not be empty")

        with transaction(self._database_path, timeout=self._timeout) as conn:
            cursor = conn.execute("INSERT INTO books (name) VALUES (?)", (name,))
            book_id = cursor.lastrowid

        logger.debug("Inserted book %s", book_id)
        return book_id

    def list_all(self) -> list[BookEntity]:
        """Return every stored book ordered by id."""
        with transaction(self._database_path, timeout=self._timeout) as conn:
            rows = conn.execute("SELECT id, name FROM books ORDER BY id").fetchall()
        return [BookEntity(id=row["id"], name=row["name"]) for row in rows]

    def count(self) -> int:
        """Return the number of stored books."""
        with transaction(self._database_path, timeout=self._timeout) as conn:
            (total,) = conn.execute("SELECT COUNT(*) FROM books").fetchone()
        return total

    def health_check(self) -> bool:
        """Check if the database can be opened and queried.

        Returns:
            True if healthy, False otherwise
        """
        try:
            conn = connect(self._database_path, timeout=self._timeout)
        except StoreError:
            return False
        try:
            conn.execute("SELECT 1 FROM books LIMIT 1")
            return True
        except sqlite3.Error:
            return False
        finally:
            conn.close()

    @property
    def database_path(self) -> Path:
        """Get the database file path."""
        return self._database_path
