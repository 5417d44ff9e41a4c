"""Service layer for business logic.

This layer contains the core business logic and orchestration.
Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from book_cache.services import BookService

    service = BookService.create(store=store, cache=cache)
    service = BookService.create(store=store, cache=cache, cache_ttl=30)
    ```
"""

from .book_service import BookService
from .snapshot_codec import SnapshotDecodeError, decode_snapshot, encode_snapshot

__all__ = [
    "BookService",
    "SnapshotDecodeError",
    "decode_snapshot",
    "encode_snapshot",
]
