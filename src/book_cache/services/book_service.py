"""Book service for core business logic.

This service implements cache-aside reads and invalidate-on-write for the
book collection by coordinating the store (source of truth) and the
snapshot cache (optional accelerator).
"""

import logging

from book_cache.entities import BookEntity
from book_cache.errors import CacheError, StoreError, ValidationError
from book_cache.protocols import BookStore, SnapshotCache
from book_cache.services.snapshot_codec import SnapshotDecodeError, decode_snapshot, encode_snapshot

logger = logging.getLogger(__name__)

DEFAULT_CACHE_KEY = "books:all"
DEFAULT_CACHE_TTL = 60


class BookService:
    """Core collection orchestration service.

    This service depends on PROTOCOLS, not concrete implementations:
    - BookStore: can be SQLite, PostgreSQL, etc.
    - SnapshotCache: can be Redis, in-memory, etc.

    The service keeps no mutable state between requests and takes no locks.
    Cache failures never escape it: on reads they count as a miss, on
    invalidation they are logged and ignored. If an invalidation fails after a
    successful write, readers may see the old snapshot until it expires.

    Example:
        ```python
        from book_cache.repositories import InMemorySnapshotCache, SqliteBookRepository
        from book_cache.services import BookService

        service = BookService.create(
            store=SqliteBookRepository.create(Path("data/books.db")),
            cache=InMemorySnapshotCache(),
        )
        service.insert("Go in Action")
        service.get_all()  # [BookEntity(id=1, name="Go in Action")]
        ```
    """

    SEED_NAMES: tuple[str, ...] = ("C# Fundamentals", "ASP.NET Core Basics")

    def __init__(
        self,
        store: BookStore,
        cache: SnapshotCache,
        cache_key: str = DEFAULT_CACHE_KEY,
        cache_ttl: int = DEFAULT_CACHE_TTL,
    ) -> None:
        """Initialize the book service.

        Args:
            store: Durable book store (required).
            cache: Snapshot cache backend (required).
            cache_key: Key under which the full collection snapshot is cached.
            cache_ttl: Snapshot time-to-live in seconds.
        """
        if cache_ttl <= 0:
            raise ValueError("cache_ttl must be positive")
        self._store = store
        self._cache = cache
        self._cache_key = cache_key
        self._cache_ttl = cache_ttl

    @classmethod
    def create(
        cls,
        store: BookStore,
        cache: SnapshotCache,
        cache_key: str | None = None,
        cache_ttl: int | None = None,
    ) -> "BookService":
        """Factory method to create BookService with sensible defaults.

        Args:
            store: Durable book store (required).
            cache: Snapshot cache backend (required).
            cache_key: Snapshot key. If None, uses "books:all".
            cache_ttl: Snapshot TTL in seconds. If None, uses 60.

        Returns:
            Configured BookService instance
        """
        return cls(
            store=store,
            cache=cache,
            cache_key=cache_key or DEFAULT_CACHE_KEY,
            cache_ttl=cache_ttl or DEFAULT_CACHE_TTL,
        )

    def get_all(self) -> list[BookEntity]:
        """Return the full collection, served from cache when possible.

        Business logic:
        1. Look up the snapshot in the cache
        2. On a hit with a decodable payload, return it without touching the store
        3. Otherwise (miss, corrupt payload, cache failure) list the store
        4. Write the fresh snapshot back to the cache (best-effort)

        Returns:
            All books

        Raises:
            StoreError: If the store has to be read and fails
        """
        cached = self._cache_get()
        if cached is not None:
            try:
                books = decode_snapshot(cached)
            except SnapshotDecodeError as e:
                logger.warning("Discarding corrupt snapshot under %r: %s", self._cache_key, e)
            else:
                logger.debug("Snapshot cache hit for %r", self._cache_key)
                return books

        logger.debug("Snapshot cache miss for %r, reading store", self._cache_key)
        books = self._store.list_all()
        self._cache_set(encode_snapshot(books))
        return books

    def insert(self, name: str) -> int:
        """Add a book and invalidate the cached snapshot.

        The cache is only touched after the store write succeeds.

        Args:
            name: The book title

        Returns:
            The new book's id

        Raises:
            ValidationError: If the name is empty or blank
            StoreError: If the store rejects or fails the write
        """
        book_id = self._insert_one(name)
        self._invalidate()
        return book_id

    def seed(self) -> list[int]:
        """Insert the sample books, then invalidate the snapshot once.

        Stops at the first failing insert. If at least one insert went through,
        the snapshot is still invalidated before the error is re-raised.

        Returns:
            Ids of the inserted books

        Raises:
            StoreError: The first store failure encountered
        """
        inserted: list[int] = []
        try:
            for name in self.SEED_NAMES:
                inserted.append(self._insert_one(name))
        finally:
            if inserted:
                self._invalidate()
        logger.info("Seeded %d books", len(inserted))
        return inserted

    def count(self) -> int:
        """Count books straight from the store, never from the cache.

        Raises:
            StoreError: If the store fails
        """
        return self._store.count()

    def is_healthy(self) -> dict[str, bool]:
        """Check store and cache reachability.

        Returns:
            Dict with "store" and "cache" health flags
        """
        return {
            "store": self._store.health_check(),
            "cache": self._cache.health_check(),
        }

    def _insert_one(self, name: str) -> int:
        if not name or not name.strip():
            raise ValidationError("Book name must not be empty")
        try:
            book_id = self._store.insert(name)
        except StoreError as e:
            logger.error("Failed to insert book %r: %s", name, e)
            raise
        logger.info("Added book %s (%r)", book_id, name)
        return book_id

    def _cache_get(self) -> bytes | None:
        try:
            return self._cache.get(self._cache_key)
        except CacheError as e:
            logger.warning("Cache read failed, treating as miss: %s", e)
            return None

    def _cache_set(self, value: bytes) -> None:
        try:
            self._cache.set(self._cache_key, value, self._cache_ttl)
        except CacheError as e:
            logger.warning("Cache write failed, snapshot not stored: %s", e)

    def _invalidate(self) -> None:
        try:
            self._cache.remove(self._cache_key)
        except CacheError as e:
            # Stale snapshot may be served until TTL expiry.
            logger.warning("Cache invalidation failed for %r: %s", self._cache_key, e)

    @property
    def cache_key(self) -> str:
        """Get the snapshot cache key."""
        return self._cache_key

    @property
    def cache_ttl(self) -> int:
        """Get the snapshot TTL in seconds."""
        return self._cache_ttl

    @property
    def store(self) -> BookStore:
        """Get the underlying store (for testing)."""
        return self._store

    @property
    def cache(self) -> SnapshotCache:
        """Get the underlying cache (for testing)."""
        return self._cache
