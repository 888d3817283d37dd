"""
REST endpoints for reading the book catalog
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request

from ...catalog.models import BookRecord
from ...catalog.repository import BookCatalog
from ...logging import book_lookup_context

router = APIRouter()


def get_catalog(request: Request) -> BookCatalog:
    return request.app.state.catalog


CatalogDep = Annotated[BookCatalog, Depends(get_catalog)]


@router.get("", response_model=list[BookRecord])
def list_books(catalog: CatalogDep) -> list[BookRecord]:
    """Return every book in catalog order."""
    return list(catalog.list_books())


@router.get("/id/{book_id}", response_model=BookRecord)
def get_book_by_id(book_id: str, catalog: CatalogDep) -> BookRecord:
    """Return one book, or 404 when no book has this id."""
    with book_lookup_context(book_id):
        book = catalog.get_book_by_id(book_id)
    if book is None:
        raise HTTPException(status_code=404, detail="Book not found")
    return book
