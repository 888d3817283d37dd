"""
Book resolvers for GraphQL API
"""

import strawberry

from ...catalog.repository import BookCatalog
from ...logging import book_lookup_context
from ..types.book import Book


def get_catalog(info: strawberry.Info) -> BookCatalog:
    """Fetch the catalog injected into the GraphQL context."""
    context = info.context
    catalog = context.get("catalog") if isinstance(context, dict) else None
    if catalog is None:
        raise RuntimeError("GraphQL context is missing the 'catalog' entry")
    return catalog


def resolve_book_by_id(info: strawberry.Info, id: str | None) -> Book | None:
    """Get a book by exact id; None when absent, null or omitted."""
    if id is None or id is strawberry.UNSET:
        return None

    with book_lookup_context(id):
        record = get_catalog(info).get_book_by_id(id)
    if record is None:
        return None
    return Book.from_record(record)


def resolve_books(info: strawberry.Info) -> list[Book]:
    return [Book.from_record(record) for record in get_catalog(info).list_books()]
