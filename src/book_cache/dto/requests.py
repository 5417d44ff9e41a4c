"""Request DTOs for API endpoints."""

from pydantic import BaseModel, Field


class CreateBookRequest(BaseModel):
    """Request DTO for adding a book.

    The handler will convert this to internal calls to the service layer.
    """

    name: str = Field(..., description="The book title", min_length=1)
