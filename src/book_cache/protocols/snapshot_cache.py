"""Snapshot cache protocol.

Defines the interface for the key-value cache that holds a serialized
snapshot of the full book collection. The cache is an optional accelerator:
losing an entry is always safe.

Implementations can include:
- Redis (default when configured)
- In-process dictionary
- Memcached
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class SnapshotCache(Protocol):
    """Protocol for snapshot cache backends.

    Backend failures (timeouts, unreachable server) are raised as
    ``CacheError``. A miss is not a failure and returns None.
    """

    def get(self, key: str) -> bytes | None:
        """Fetch a cached value.

        Args:
            key: The cache key

        Returns:
            The stored bytes, or None on a miss or expired entry
        """
        ...

    def set(self, key: str, value: bytes, ttl: int) -> None:
        """Store a value, overwriting any previous one.

        Args:
            key: The cache key
            value: The serialized payload
            ttl: Time-to-live in seconds
        """
        ...

    def remove(self, key: str) -> None:
        """Remove a value. Removing an absent key is a no-op.

        Args:
            key: The cache key
        """
        ...

    def health_check(self) -> bool:
        """Check if the cache backend is reachable.

        Returns:
            True if healthy, False otherwise
        """
        ...
