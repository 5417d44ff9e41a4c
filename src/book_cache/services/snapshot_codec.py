"""Serialization of the collection snapshot stored in the cache.

The snapshot is a UTF-8 JSON array of ``{"id": int, "name": str}`` objects.
Decoding is strict: anything that is not a well-formed snapshot raises
``SnapshotDecodeError`` so the caller can treat it as a cache miss.
"""

import json

from book_cache.entities import BookEntity


class SnapshotDecodeError(ValueError):
    """Raised when cached bytes are not a valid collection snapshot."""


def encode_snapshot(books: list[BookEntity]) -> bytes:
    """Serialize a full collection to bytes."""
    payload = [{"id": book.id, "name": book.name} for book in books]
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def decode_snapshot(raw: bytes) -> list[BookEntity]:
    """Deserialize cached bytes into a collection.

    Args:
        raw: Bytes previously produced by ``encode_snapshot``

    Returns:
        The decoded books, in stored order

    Raises:
        SnapshotDecodeError: If the payload is corrupt or has the wrong shape
    """
    try:
        payload = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise SnapshotDecodeError(f"Unparseable snapshot: {e}") from e

    if not isinstance(payload, list):
        raise SnapshotDecodeError(f"Snapshot must be a list, got {type(payload).__name__}")

    books = []
    for item in payload:
        if not isinstance(item, dict):
            raise SnapshotDecodeError(f"Snapshot item must be an object, got {item!r}")
        book_id = item.get("id")
        name = item.get("name")
        # bool is a subclass of int
        if not isinstance(book_id, int) or isinstance(book_id, bool):
            raise SnapshotDecodeError(f"Invalid book id in snapshot: {book_id!r}")
        if not isinstance(name, str) or not name:
            raise SnapshotDecodeError(f"Invalid book name in snapshot: {name!r}")
        books.append(BookEntity(id=book_id, name=name))

    return books
