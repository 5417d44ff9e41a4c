"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Schema bootstrapped and services built during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from book_cache.bootstrap import SchemaBootstrapper
from book_cache.config import Settings, get_settings
from book_cache.db import resolve_database_path
from book_cache.handlers import BookHandler
from book_cache.protocols import SnapshotCache
from book_cache.repositories import (
    InMemorySnapshotCache,
    RedisSnapshotCache,
    SqliteBookRepository,
)
from book_cache.services import BookService

logger = logging.getLogger(__name__)


def build_snapshot_cache(settings: Settings) -> SnapshotCache:
    """Pick the snapshot cache backend from settings.

    Args:
        settings: Application settings

    Returns:
        RedisSnapshotCache when Redis is configured, InMemorySnapshotCache otherwise
    """
    if settings.use_redis:
        logger.info("Using Redis snapshot cache at %s", settings.redis_url)
        return RedisSnapshotCache.create(settings)

    logger.info("No Redis configured, using in-process snapshot cache")
    return InMemorySnapshotCache()


def get_book_service(request: Request) -> BookService:
    """Dependency injection for BookService from app.state.

    Raises:
        RuntimeError: If service is not initialized
    """
    service = getattr(request.app.state, "book_service", None)
    if service is None:
        raise RuntimeError("BookService not initialized. Check lifespan setup.")
    return service


def get_handler(request: Request) -> BookHandler:
    """Dependency injection for BookHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The BookHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "book_handler", None)
    if handler is None:
        raise RuntimeError("BookHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores them in app.state:
    1. Schema bootstrap - must succeed before the app serves anything
    2. Repository and snapshot cache (data access)
    3. Service (business logic) - stored in app.state.book_service
    4. Handler (HTTP endpoints) - stored in app.state.book_handler

    Settings are taken from app.state.settings when present (set by
    ``create_app``), otherwise from the environment.

    Raises:
        StoreError: If the schema cannot be created; startup is aborted
    """
    settings: Settings = getattr(app.state, "settings", None) or get_settings()
    database_path = resolve_database_path(settings.database_url)

    # Fatal on failure: the exception aborts startup.
    SchemaBootstrapper(database_path, timeout=settings.database_timeout).ensure_schema()

    repository = SqliteBookRepository.create(database_path, timeout=settings.database_timeout)
    cache = build_snapshot_cache(settings)

    book_service = BookService.create(
        store=repository,
        cache=cache,
        cache_key=settings.cache_key,
        cache_ttl=settings.cache_ttl,
    )
    book_handler = BookHandler(book_service=book_service)

    app.state.book_service = book_service
    app.state.book_handler = book_handler

    logger.info(
        "Book service ready (db=%s, cache_key=%r, ttl=%ss)",
        database_path,
        settings.cache_key,
        settings.cache_ttl,
    )

    yield

    del app.state.book_handler
    del app.state.book_service
    logger.info("Book service shut down")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[BookHandler, Depends(get_handler)]
ServiceDep = Annotated[BookService, Depends(get_book_service)]
