"""
Tests for the SQLite book store and schema bootstrap.
"""

import sqlite3

import pytest

from book_cache.bootstrap import SchemaBootstrapper
from book_cache.entities import BookEntity
from book_cache.errors import StoreError, StoreErrorKind
from book_cache.repositories import SqliteBookRepository


@pytest.fixture
def repository(database_path) -> SqliteBookRepository:
    return SqliteBookRepository.create(database_path)


def _tables(path) -> list[str]:
    conn = sqlite3.connect(path)
    try:
        rows = conn.execute(
            "SELECT name FROM sqlite_master WHERE type = 'table' AND name = 'books'"
        ).fetchall()
    finally:
        conn.close()
    return [row[0] for row in rows]


def test_ensure_schema_creates_directory_and_table(tmp_path):
    path = tmp_path / "nested" / "dir" / "books.db"

    SchemaBootstrapper(path).ensure_schema()

    assert path.exists()
    assert _tables(path) == ["books"]


def test_ensure_schema_is_idempotent(tmp_path):
    """Running the bootstrap twice succeeds and keeps a single table."""
    path = tmp_path / "books.db"
    bootstrapper = SchemaBootstrapper(path)

    bootstrapper.ensure_schema()
    SqliteBookRepository(path).insert("Go in Action")
    bootstrapper.ensure_schema()

    assert _tables(path) == ["books"]
    assert SqliteBookRepository(path).count() == 1


def test_ensure_schema_failure_raises_store_error(tmp_path):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("file in the way")

    with pytest.raises(StoreError) as exc_info:
        SchemaBootstrapper(blocker / "books.db").ensure_schema()

    assert exc_info.value.kind is StoreErrorKind.CONNECTION_FAILURE


def test_insert_assigns_increasing_ids(repository):
    assert repository.insert("Go in Action") == 1
    assert repository.insert("The Go Programming Language") == 2


def test_list_all_returns_insertion_order(repository):
    repository.insert("Dune")
    repository.insert("Emma")

    assert repository.list_all() == [
        BookEntity(id=1, name="Dune"),
        BookEntity(id=2, name="Emma"),
    ]


def test_list_all_on_empty_table(repository):
    assert repository.list_all() == []
    assert repository.count() == 0


def test_count(repository):
    for name in ["a", "b", "c"]:
        repository.insert(name)
    assert repository.count() == 3


def test_insert_empty_name_is_constraint_violation(repository):
    with pytest.raises(StoreError) as exc_info:
        repository.insert("")

    assert exc_info.value.kind is StoreErrorKind.CONSTRAINT_VIOLATION
    assert repository.count() == 0


def test_table_rejects_empty_names(database_path):
    """The table itself rejects empty names written past the repository check."""
    conn = sqlite3.connect(database_path)
    try:
        with pytest.raises(sqlite3.IntegrityError):
            conn.execute("INSERT INTO books (name) VALUES ('')")
    finally:
        conn.close()


def test_missing_table_is_unavailable(tmp_path):
    repository = SqliteBookRepository(tmp_path / "empty.db")

    with pytest.raises(StoreError) as exc_info:
        repository.count()

    assert exc_info.value.kind is StoreErrorKind.UNAVAILABLE


def test_unopenable_database_is_connection_failure(tmp_path):
    repository = SqliteBookRepository(tmp_path / "missing_dir" / "books.db")

    with pytest.raises(StoreError) as exc_info:
        repository.list_all()

    assert exc_info.value.kind is StoreErrorKind.CONNECTION_FAILURE


def test_health_check(repository, tmp_path):
    assert repository.health_check() is True
    assert SqliteBookRepository(tmp_path / "missing_dir" / "books.db").health_check() is False
