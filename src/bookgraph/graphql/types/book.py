"""
Book GraphQL type definitions
"""

import strawberry

from ...catalog.models import BookRecord


@strawberry.type
class Book:
    """Book type for GraphQL API."""

    id: str | None
    name: str | None
    genre: str | None

    @classmethod
    def from_record(cls, record: BookRecord) -> "Book":
        return cls(id=record.id, name=record.name, genre=record.genre)
