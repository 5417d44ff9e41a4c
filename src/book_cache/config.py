import os
from dataclasses import dataclass, field
from functools import lru_cache

import redis
from dotenv import load_dotenv

load_dotenv()

CACHE_BACKENDS = ("auto", "redis", "memory")


def _env(name: str, default: str | None = None):
    return field(default_factory=lambda: os.getenv(name, default))


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Database (accepts a bare path or "Data Source=<path>")
    database_url: str = _env("DATABASE_URL", "data/books.db")
    database_timeout: float = field(
        default_factory=lambda: float(os.getenv("DATABASE_TIMEOUT", "5.0"))
    )

    # Redis
    redis_url: str | None = _env("REDIS_URL")
    redis_password: str | None = _env("REDIS_PASSWORD")

    # Cache
    cache_backend: str = field(default_factory=lambda: os.getenv("CACHE_BACKEND", "auto").lower())
    cache_key: str = _env("CACHE_KEY", "books:all")
    cache_key_prefix: str = _env("CACHE_KEY_PREFIX", "BookApi_")
    cache_ttl: int = field(default_factory=lambda: int(os.getenv("CACHE_TTL_SECONDS", "60")))
    cache_timeout: float = field(default_factory=lambda: float(os.getenv("CACHE_TIMEOUT", "0.5")))

    # Logging
    log_level: str = _env("LOG_LEVEL", "INFO")

    # API
    api_host: str = _env("API_HOST", "0.0.0.0")
    api_port: int = field(default_factory=lambda: int(os.getenv("API_PORT", "8000")))
    api_reload: bool = field(
        default_factory=lambda: os.getenv("API_RELOAD", "false").lower() == "true"
    )

    @property
    def use_redis(self) -> bool:
        """Check whether the snapshot cache should be backed by Redis.

        Returns:
            True for the "redis" backend, or for "auto" when REDIS_URL is set
        """
        if self.cache_backend == "auto":
            return bool(self.redis_url)
        return self.cache_backend == "redis"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.cache_backend not in CACHE_BACKENDS:
            raise ValueError(
                f"CACHE_BACKEND must be one of {list(CACHE_BACKENDS)}, got {self.cache_backend!r}"
            )

        if self.cache_backend == "redis" and not self.redis_url:
            raise ValueError("REDIS_URL is required when CACHE_BACKEND is 'redis'")

        if not self.cache_key:
            raise ValueError("CACHE_KEY must not be empty")

        if self.cache_ttl <= 0:
            raise ValueError(f"CACHE_TTL_SECONDS must be positive, got {self.cache_ttl}")

        if self.cache_timeout <= 0:
            raise ValueError(f"CACHE_TIMEOUT must be positive, got {self.cache_timeout}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def get_redis_client(settings: Settings) -> redis.Redis:
    """Create a Redis client with short socket timeouts.

    Cache calls must degrade to a miss instead of blocking a request, so both
    the connect and read timeouts use ``settings.cache_timeout``.
    """
    return redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        socket_timeout=settings.cache_timeout,
        socket_connect_timeout=settings.cache_timeout,
        decode_responses=False,
    )
