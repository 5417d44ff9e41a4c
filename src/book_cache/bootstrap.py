"""Schema bootstrap run once at startup.

The service must not accept traffic until the ``books`` table exists.
``SchemaBootstrapper.ensure_schema`` is safe to call on every start,
including against an already initialized database.
"""

import logging
from pathlib import Path

from book_cache.db import transaction
from book_cache.errors import StoreError, StoreErrorKind

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS books (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL CHECK (length(name) > 0)
);
"""


class SchemaBootstrapper:
    """Creates the backing table for the book collection if it is absent."""

    def __init__(self, database_path: Path, timeout: float = 5.0) -> None:
        """Initialize the bootstrapper.

        Args:
            database_path: Path to the SQLite database file
            timeout: Seconds to wait on a locked database
        """
        self._database_path = Path(database_path)
        self._timeout = timeout

    def ensure_schema(self) -> None:
        """Create the database directory and the ``books`` table if missing.

        Raises:
            StoreError: If the directory or the table cannot be created.
                Callers should treat this as fatal.
        """
        try:
            self._database_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreError(
                StoreErrorKind.CONNECTION_FAILURE,
                f"Cannot create database directory {self._database_path.parent}: {e}",
            ) from e

        with transaction(self._database_path, timeout=self._timeout) as conn:
            conn.executescript(SCHEMA)

        logger.info("Schema ready at %s", self._database_path)
