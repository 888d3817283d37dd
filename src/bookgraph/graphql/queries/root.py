"""
Root GraphQL query definitions
"""

import strawberry

from ..resolvers.book import resolve_book_by_id, resolve_books
from ..types.book import Book


@strawberry.type(name="RootQueryTypes")
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    def book(self, info: strawberry.Info, id: str | None = strawberry.UNSET) -> Book | None:
        """Get a book by ID."""
        return resolve_book_by_id(info, id)

    @strawberry.field
    def books(self, info: strawberry.Info) -> list[Book]:
        """Get every book in catalog order."""
        return resolve_books(info)
