"""Book domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BookEntity:
    """Domain entity for a stored book.

    Attributes:
        id: Store-assigned identifier, unique and never reused
        name: The book title (non-empty)
    """

    id: int
    name: str
