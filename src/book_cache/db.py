"""SQLite connection helpers.

Provides database path resolution, connection opening and the mapping of
``sqlite3`` exceptions onto ``StoreError`` kinds. A fresh connection is
opened for every operation so requests served from different threads never
share one.
"""

import os
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from book_cache.errors import StoreError, StoreErrorKind

DATA_SOURCE_PREFIX = "data source="


def resolve_database_path(database_url: str, base_dir: str | Path | None = None) -> Path:
    """Resolve the configured database location to a file path.

    Accepts either a bare path or the connection-string form
    ``Data Source=<path>`` (prefix is case insensitive). Absolute paths are
    used as is; relative paths resolve against ``base_dir`` (defaults to the
    current working directory).

    Args:
        database_url: The configured value
        base_dir: Directory that relative paths are resolved against

    Returns:
        Absolute path to the database file
    """
    value = database_url.strip()
    if value.lower().startswith(DATA_SOURCE_PREFIX):
        value = value[len(DATA_SOURCE_PREFIX):].strip()

    if not value:
        raise ValueError("Database path must not be empty")

    path = Path(value)
    if path.is_absolute():
        return path

    root = Path(base_dir) if base_dir is not None else Path(os.getcwd())
    return (root / value.lstrip("/\\")).resolve()


def translate_error(exc: sqlite3.Error) -> StoreError:
    """Map a sqlite3 exception onto a StoreError."""
    if isinstance(exc, sqlite3.IntegrityError):
        return StoreError(StoreErrorKind.CONSTRAINT_VIOLATION, str(exc))
    return StoreError(StoreErrorKind.UNAVAILABLE, str(exc))


def connect(database_path: Path, timeout: float = 5.0) -> sqlite3.Connection:
    """Open a new SQLite connection.

    Args:
        database_path: Path to the database file
        timeout: Seconds to wait on a locked database

    Returns:
        An open connection with ``sqlite3.Row`` rows

    Raises:
        StoreError: CONNECTION_FAILURE if the database cannot be opened
    """
    try:
        conn = sqlite3.connect(database_path, timeout=timeout)
    except sqlite3.Error as e:
        raise StoreError(
            StoreErrorKind.CONNECTION_FAILURE,
            f"Cannot open database {database_path}: {e}",
        ) from e
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def transaction(database_path: Path, timeout: float = 5.0) -> Iterator[sqlite3.Connection]:
    """Yield a connection, commit on success and always close it.

    sqlite3 errors raised inside the block are re-raised as ``StoreError``.
    """
    conn = connect(database_path, timeout=timeout)
    try:
        with conn:
            yield conn
    except sqlite3.Error as e:
        raise translate_error(e) from e
    finally:
        conn.close()
