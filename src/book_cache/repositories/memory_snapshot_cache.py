"""In-process implementation of SnapshotCache.

Used when no Redis URL is configured, and in tests. Entries live in a dict
guarded by a lock and expire on a monotonic clock.
"""

import threading
import time
from collections.abc import Callable


class InMemorySnapshotCache:
    """Dictionary-backed snapshot cache with per-entry expiry.

    This class satisfies the SnapshotCache protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        cache = InMemorySnapshotCache()
        cache.set("books:all", b"[]", ttl=60)
        cache.get("books:all")  # b"[]"
        ```
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        """Initialize the cache.

        Args:
            clock: Returns the current time in seconds. Injectable for tests.
        """
        self._clock = clock
        self._entries: dict[str, tuple[bytes, float]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> bytes | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            value, expires_at = entry
            if self._clock() >= expires_at:
                del self._entries[key]
                return None
            return value

    def set(self, key: str, value: bytes, ttl: int) -> None:
        with self._lock:
            self._entries[key] = (value, self._clock() + ttl)

    def remove(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def health_check(self) -> bool:
        return True
