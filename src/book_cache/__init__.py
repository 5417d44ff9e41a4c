"""Book Cache - a book collection API with a cache-aside snapshot cache.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (BookStore, SnapshotCache)
    - repositories: Data access implementations (SQLite, Redis, in-memory)
    - services: Business logic (cache-aside reads, invalidate-on-write)
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from book_cache.services import BookService

    service = BookService.create(store=store, cache=cache)
    ```

For HTTP API:
    ```python
    from book_cache.api.app import create_app
    ```
"""

__version__ = "0.1.0"

from book_cache.config import Settings, get_redis_client, get_settings  # noqa: E402
from book_cache.dto import CreateBookRequest  # noqa: E402
from book_cache.entities import BookEntity  # noqa: E402
from book_cache.errors import (  # noqa: E402
    BookServiceError,
    CacheError,
    StoreError,
    StoreErrorKind,
    ValidationError,
)
from book_cache.handlers import BookHandler  # noqa: E402
from book_cache.protocols import BookStore, SnapshotCache  # noqa: E402
from book_cache.repositories import (  # noqa: E402
    InMemorySnapshotCache,
    RedisSnapshotCache,
    SqliteBookRepository,
)
from book_cache.services import BookService  # noqa: E402

__all__ = [
    "__version__",
    # Configuration
    "Settings",
    "get_settings",
    "get_redis_client",
    # Errors
    "BookServiceError",
    "StoreError",
    "StoreErrorKind",
    "ValidationError",
    "CacheError",
    # Protocols (interfaces)
    "BookStore",
    "SnapshotCache",
    # Services (business logic)
    "BookService",
    # Handlers (HTTP)
    "BookHandler",
    # Repositories (data access)
    "SqliteBookRepository",
    "RedisSnapshotCache",
    "InMemorySnapshotCache",
    # Entities (domain models)
    "BookEntity",
    # DTOs (API contracts)
    "CreateBookRequest",
]
