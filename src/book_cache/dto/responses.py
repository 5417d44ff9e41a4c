"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field


class BookItem(BaseModel):
    """Single book in the collection listing."""

    id: int = Field(..., description="Store-assigned book identifier")
    name: str = Field(..., description="The book title")


class BookCreateResponse(BaseModel):
    """Response DTO for adding a book."""

    success: bool = Field(..., description="Whether the operation succeeded")
    id: int = Field(..., description="Identifier of the new book")
    message: str = Field(..., description="Human-readable status message")


class SeedResponse(BaseModel):
    """Response DTO for seeding sample data."""

    success: bool = Field(..., description="Whether the operation succeeded")
    ids: list[int] = Field(default_factory=list, description="Identifiers of the inserted books")
    message: str = Field(..., description="Human-readable status message")


class BookCountResponse(BaseModel):
    """Response DTO for the book count."""

    count: int = Field(..., description="Number of stored books", ge=0)
    message: str = Field(..., description="Human-readable count, e.g. 'Total Books: 3'")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    store_healthy: bool = Field(..., description="Whether the database is reachable")
    cache_healthy: bool = Field(
        ...,
        description="Whether the cache backend is reachable (the service still works without it)",
    )
