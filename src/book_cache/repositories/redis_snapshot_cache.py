"""Redis implementation of SnapshotCache.

This is the default cache backend whenever a Redis URL is configured.
Values are stored as plain strings with an expiry; every key is prefixed
with an instance name so several services can share one Redis database.
"""

import logging

import redis

from book_cache.config import Settings, get_redis_client
from book_cache.errors import CacheError

logger = logging.getLogger(__name__)


class RedisSnapshotCache:
    """Redis implementation of the snapshot cache.

    This class satisfies the SnapshotCache protocol through structural
    typing - no explicit inheritance needed.

    The client is expected to carry short socket timeouts (see
    ``get_redis_client``); any ``redis.RedisError`` surfaces as ``CacheError``.
    """

    def __init__(self, redis_client: redis.Redis, key_prefix: str = "") -> None:
        """Initialize the Redis snapshot cache.

        Args:
            redis_client: Redis client instance
            key_prefix: Prefix prepended to every key
        """
        self._client = redis_client
        self._key_prefix = key_prefix

    @classmethod
    def create(cls, settings: Settings) -> "RedisSnapshotCache":
        """Factory method to create RedisSnapshotCache from settings.

        Args:
            settings: Application settings (redis_url, cache_timeout, cache_key_prefix)

        Returns:
            Configured RedisSnapshotCache
        """
        return cls(
            redis_client=get_redis_client(settings),
            key_prefix=settings.cache_key_prefix,
        )

    def _full_key(self, key: str) -> str:
        return f"{self._key_prefix}{key}"

    def get(self, key: str) -> bytes | None:
        """Fetch a snapshot.

        Args:
            key: The cache key (without prefix)

        Returns:
            The stored bytes, or None if absent or expired

        Raises:
            CacheError: If Redis is unreachable or times out
        """
        try:
            value = self._client.get(self._full_key(key))
        except redis.RedisError as e:
            raise CacheError(f"Redis GET failed for {key!r}: {e}") from e

        if value is None:
            return None
        if isinstance(value, str):
            return value.encode("utf-8")
        return value

    def set(self, key: str, value: bytes, ttl: int) -> None:
        """Store a snapshot with an absolute expiry of ``ttl`` seconds.

        Raises:
            CacheError: If Redis is unreachable or times out
        """
        try:
            self._client.set(self._full_key(key), value, ex=ttl)
        except redis.RedisError as e:
            raise CacheError(f"Redis SET failed for {key!r}: {e}") from e

    def remove(self, key: str) -> None:
        """Delete a snapshot. Deleting a missing key is a no-op.

        Raises:
            CacheError: If Redis is unreachable or times out
        """
        try:
            self._client.delete(self._full_key(key))
        except redis.RedisError as e:
            raise CacheError(f"Redis DEL failed for {key!r}: {e}") from e

    def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(self._client.ping())
        except redis.RedisError as e:
            logger.warning("Redis ping failed: %s", e)
            return False

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client
