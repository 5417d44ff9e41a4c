"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (SQLite -> PostgreSQL, Redis -> in-memory, etc.)
- Unit testing with fake implementations
- Clear separation of concerns

Usage:
    ```python
    from book_cache.protocols import BookStore, SnapshotCache

    store: BookStore = SqliteBookRepository(...)
    cache: SnapshotCache = RedisSnapshotCache(...)
    cache: SnapshotCache = InMemorySnapshotCache()
    ```
"""

from .book_store import BookStore
from .snapshot_cache import SnapshotCache

__all__ = [
    "BookStore",
    "SnapshotCache",
]
