"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import CreateBookRequest
from .responses import (
    BookCountResponse,
    BookCreateResponse,
    BookItem,
    HealthCheckResponse,
    SeedResponse,
)

__all__ = [
    "CreateBookRequest",
    "BookItem",
    "BookCreateResponse",
    "SeedResponse",
    "BookCountResponse",
    "HealthCheckResponse",
]
