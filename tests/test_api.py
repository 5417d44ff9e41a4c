"""
Tests for the Books API.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient

from book_cache.api.app import create_app
from book_cache.api.dependencies import lifespan
from book_cache.config import Settings
from book_cache.errors import CacheError, StoreError, StoreErrorKind


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        database_url=f"Data Source={tmp_path / 'data' / 'books.db'}",
        cache_backend="memory",
    )


@pytest.fixture
def client(settings):
    """Create a test client; entering it runs the lifespan (schema bootstrap)."""
    with TestClient(create_app(settings)) as client:
        yield client


def test_root(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Books API"
    assert data["endpoints"]["books"] == "/api/books"


def test_startup_creates_database(settings, tmp_path, client):
    assert (tmp_path / "data" / "books.db").exists()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "store_healthy": True, "cache_healthy": True}


def test_list_books_empty(client):
    response = client.get("/api/books")
    assert response.status_code == 200
    assert response.json() == []


def test_add_book_then_count_and_list(client):
    response = client.post("/api/books", json={"name": "Go in Action"})
    assert response.status_code == 200
    assert response.json() == {"success": True, "id": 1, "message": "Book Added"}

    response = client.get("/api/books/count")
    assert response.status_code == 200
    assert response.json() == {"count": 1, "message": "Total Books: 1"}

    response = client.get("/api/books")
    assert response.json() == [{"id": 1, "name": "Go in Action"}]


def test_add_book_invalidates_cached_listing(client):
    assert client.get("/api/books").json() == []

    client.post("/api/books", json={"name": "Dune"})

    assert client.get("/api/books").json() == [{"id": 1, "name": "Dune"}]


def test_repeated_listing_is_byte_identical(client):
    client.post("/api/books", json={"name": "Dune"})

    first = client.get("/api/books")
    second = client.get("/api/books")

    assert first.content == second.content


def test_add_book_empty_name_rejected_by_schema(client):
    response = client.post("/api/books", json={"name": ""})
    assert response.status_code == 422
    assert client.get("/api/books/count").json()["count"] == 0


def test_add_book_blank_name_rejected_by_service(client):
    response = client.post("/api/books", json={"name": "   "})
    assert response.status_code == 400
    assert client.get("/api/books/count").json()["count"] == 0


def test_add_book_missing_name(client):
    response = client.post("/api/books", json={})
    assert response.status_code == 422


def test_seed(client):
    response = client.post("/api/books/seed")
    assert response.status_code == 200
    assert response.json() == {"success": True, "ids": [1, 2], "message": "Data Seeded"}

    names = [book["name"] for book in client.get("/api/books").json()]
    assert names == ["C# Fundamentals", "ASP.NET Core Basics"]


def test_store_failure_returns_503(client):
    service = client.app.state.book_service

    def broken_list_all():
        raise StoreError(StoreErrorKind.CONNECTION_FAILURE, "cannot open database")

    service.store.list_all = broken_list_all

    response = client.get("/api/books")
    assert response.status_code == 503


def test_cache_outage_is_invisible_to_clients(client):
    cache = client.app.state.book_service.cache

    def broken(*args, **kwargs):
        raise CacheError("Timeout reading from socket")

    cache.get = broken
    cache.set = broken
    cache.remove = broken

    assert client.post("/api/books", json={"name": "Dune"}).status_code == 200
    response = client.get("/api/books")
    assert response.status_code == 200
    assert response.json() == [{"id": 1, "name": "Dune"}]


def test_schema_failure_aborts_startup(tmp_path):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("file in the way")
    settings = Settings(database_url=str(blocker / "books.db"), cache_backend="memory")

    app = create_app(settings)

    async def start() -> None:
        async with lifespan(app):
            pass

    with pytest.raises(StoreError):
        asyncio.run(start())
    assert not hasattr(app.state, "book_service")
