"""Repository layer for data access.

This layer abstracts external dependencies (SQLite, Redis) behind
protocol-based interfaces. This enables:
- Easy swapping of implementations (Redis -> in-memory, SQLite -> PostgreSQL)
- Unit testing with fake implementations
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from book_cache.protocols import BookStore, SnapshotCache

from .memory_snapshot_cache import InMemorySnapshotCache
from .redis_snapshot_cache import RedisSnapshotCache
from .sqlite_repository import SqliteBookRepository

__all__ = [
    "BookStore",
    "SnapshotCache",
    "SqliteBookRepository",
    "RedisSnapshotCache",
    "InMemorySnapshotCache",
]
