"""
Book catalog: record model, data sources and the read-only lookup service.
"""

from .models import BookRecord, FieldDescription, TypeDescription, describe_book_type
from .repository import BookCatalog, CatalogError, build_catalog
from .sources import (
    SEED_BOOKS,
    BookSource,
    BookSourceError,
    BookSourceParseError,
    BookSourceReadError,
    JsonFileBookSource,
    StaticBookSource,
)

__all__ = [
    "SEED_BOOKS",
    "BookCatalog",
    "BookRecord",
    "BookSource",
    "BookSourceError",
    "BookSourceParseError",
    "BookSourceReadError",
    "CatalogError",
    "FieldDescription",
    "JsonFileBookSource",
    "StaticBookSource",
    "TypeDescription",
    "build_catalog",
    "describe_book_type",
]
