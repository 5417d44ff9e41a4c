"""Shared fixtures and fakes for the test suite."""

import pytest

from book_cache.bootstrap import SchemaBootstrapper
from book_cache.entities import BookEntity
from book_cache.errors import CacheError, StoreError, StoreErrorKind
from book_cache.repositories import InMemorySnapshotCache, SqliteBookRepository
from book_cache.services import BookService


class FakeBookStore:
    """In-memory BookStore that counts calls and can fail on demand."""

    def __init__(self) -> None:
        self.books: list[BookEntity] = []
        self.insert_calls = 0
        self.list_calls = 0
        self.count_calls = 0
        # Fail the Nth insert call (1-based) when set
        self.fail_on_insert: int | None = None
        self.fail_reads = False

    def insert(self, name: str) -> int:
        self.insert_calls += 1
        if self.fail_on_insert == self.insert_calls:
            raise StoreError(StoreErrorKind.UNAVAILABLE, "database is locked")
        if not name:
            raise StoreError(StoreErrorKind.CONSTRAINT_VIOLATION, "empty name")
        book = BookEntity(id=len(self.books) + 1, name=name)
        self.books.append(book)
        return book.id

    def list_all(self) -> list[BookEntity]:
        self.list_calls += 1
        if self.fail_reads:
            raise StoreError(StoreErrorKind.CONNECTION_FAILURE, "cannot open database")
        return list(self.books)

    def count(self) -> int:
        self.count_calls += 1
        if self.fail_reads:
            raise StoreError(StoreErrorKind.CONNECTION_FAILURE, "cannot open database")
        return len(self.books)

    def health_check(self) -> bool:
        return not self.fail_reads


class FakeSnapshotCache:
    """Dict-backed SnapshotCache that records calls and can simulate outages."""

    def __init__(self) -> None:
        self.entries: dict[str, bytes] = {}
        self.get_calls = 0
        self.set_calls = 0
        self.remove_calls = 0
        self.last_ttl: int | None = None
        self.fail_get = False
        self.fail_set = False
        self.fail_remove = False

    def get(self, key: str) -> bytes | None:
        self.get_calls += 1
        if self.fail_get:
            raise CacheError("timeout reading from cache")
        return self.entries.get(key)

    def set(self, key: str, value: bytes, ttl: int) -> None:
        self.set_calls += 1
        if self.fail_set:
            raise CacheError("timeout writing to cache")
        self.entries[key] = value
        self.last_ttl = ttl

    def remove(self, key: str) -> None:
        self.remove_calls += 1
        if self.fail_remove:
            raise CacheError("timeout deleting from cache")
        self.entries.pop(key, None)

    def health_check(self) -> bool:
        return not self.fail_get


@pytest.fixture
def store() -> FakeBookStore:
    return FakeBookStore()


@pytest.fixture
def cache() -> FakeSnapshotCache:
    return FakeSnapshotCache()


@pytest.fixture
def service(store, cache) -> BookService:
    return BookService(store=store, cache=cache, cache_key="books:all", cache_ttl=60)


@pytest.fixture
def database_path(tmp_path):
    """Path to a bootstrapped SQLite database in a temp directory."""
    path = tmp_path / "data" / "books.db"
    SchemaBootstrapper(path).ensure_schema()
    return path


@pytest.fixture
def sqlite_service(database_path) -> BookService:
    """BookService over a real SQLite store and in-memory cache."""
    return BookService.create(
        store=SqliteBookRepository.create(database_path),
        cache=InMemorySnapshotCache(),
    )
