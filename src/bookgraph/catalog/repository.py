"""
Read-only book catalog built once from a data source.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from ..logging import get_logger
from .models import BookRecord
from .sources import BookSource, JsonFileBookSource, StaticBookSource

if TYPE_CHECKING:
    from ..config import Settings

logger = get_logger(__name__)


class CatalogError(ValueError):
    """Raised when records violate catalog invariants."""


class BookCatalog:
    """
    Immutable, ordered collection of book records.

    Records are indexed by id at construction; ids must be non-empty
    and unique, and lookups compare them exactly.
    """

    def __init__(self, books: Iterable[BookRecord]):
        self._books: tuple[BookRecord, ...] = tuple(books)
        self._by_id: dict[str, BookRecord] = {}

        for book in self._books:
            if not book.id:
                raise CatalogError(f"Book record has an empty id: {book!r}")
            if book.id in self._by_id:
                raise CatalogError(f"Duplicate book id '{book.id}'")
            self._by_id[book.id] = book

    @classmethod
    def from_source(cls, source: BookSource) -> BookCatalog:
        """Build a catalog from everything a source loads."""
        catalog = cls(source.load())
        logger.info("Book catalog loaded", source=source.name, count=len(catalog))
        return catalog

    def get_book_by_id(self, id: str) -> BookRecord | None:
        """
        Get a book by its id.

        Args:
            id: Exact, case-sensitive identifier

        Returns:
            The matching record, or None if no record has that id
        """
        book = self._by_id.get(id)
        if book is None:
            logger.debug("Book not found", book_id=id)
        return book

    def list_books(self) -> tuple[BookRecord, ...]:
        """All records in collection order."""
        return self._books

    def __len__(self) -> int:
        return len(self._books)

    def __contains__(self, id: object) -> bool:
        return id in self._by_id


def source_from_settings(settings: Settings) -> BookSource:
    if settings.data_file:
        return JsonFileBookSource(settings.data_file)
    return StaticBookSource()


def build_catalog(settings: Settings | None = None) -> BookCatalog:
    """Build the process catalog from the configured data source."""
    if settings is None:
        from ..config import settings as default_settings

        settings = default_settings

    return BookCatalog.from_source(source_from_settings(settings))
