from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from book_cache import __version__
from book_cache.api.dependencies import HandlerDep, lifespan
from book_cache.config import Settings, get_settings
from book_cache.dto import (
    BookCountResponse,
    BookCreateResponse,
    BookItem,
    CreateBookRequest,
    HealthCheckResponse,
    SeedResponse,
)
from book_cache.logging_config import setup_logging


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Settings to run with. If None, loads them from the environment.

    Returns:
        Configured FastAPI app; services are wired up in its lifespan
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="Books API",
        description="Book collection backed by SQLite with a cache-aside snapshot cache",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    def root() -> dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": "Books API",
            "version": __version__,
            "endpoints": {
                "books": "/api/books",
                "count": "/api/books/count",
                "seed": "/api/books/seed",
                "health": "/health",
                "docs": "/docs",
            },
        }

    @app.get("/health", response_model=HealthCheckResponse)
    def health(handler: HandlerDep) -> HealthCheckResponse:
        """Health check endpoint."""
        return handler.health_check()

    @app.get("/api/books", response_model=list[BookItem])
    def list_books(handler: HandlerDep) -> list[BookItem]:
        """List all books (served from the snapshot cache when fresh)."""
        return handler.list_books()

    @app.post("/api/books", response_model=BookCreateResponse)
    def add_book(request: CreateBookRequest, handler: HandlerDep) -> BookCreateResponse:
        """Add a book and invalidate the cached snapshot."""
        return handler.add_book(request)

    @app.post("/api/books/seed", response_model=SeedResponse)
    def seed_books(handler: HandlerDep) -> SeedResponse:
        """Insert sample books and invalidate the cached snapshot."""
        return handler.seed()

    @app.get("/api/books/count", response_model=BookCountResponse)
    def count_books(handler: HandlerDep) -> BookCountResponse:
        """Count books directly from the database."""
        return handler.count_books()

    return app


def main() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "book_cache.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )


if __name__ == "__main__":
    main()
