"""Data sources that supply book records to the catalog."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from pathlib import Path

from pydantic import ValidationError

from ..logging import get_logger
from .models import BookRecord

logger = get_logger(__name__)


class BookSourceError(Exception):
    """Raised when a source cannot produce its records."""


class BookSourceReadError(BookSourceError):
    """The backing file could not be read."""


class BookSourceParseError(BookSourceError):
    """The backing data is not a valid list of book records."""


class BookSource(ABC):
    name: str

    @abstractmethod
    def load(self) -> list[BookRecord]:
        """Return every record, in collection order."""


SEED_BOOKS: tuple[BookRecord, ...] = (
    BookRecord(id="1", name="Kento", genre="Fantasy"),
    BookRecord(id="2", name="hikari", genre="Fantasy"),
    BookRecord(id="3", name="Kento", genre="Sci"),
)


class StaticBookSource(BookSource):
    """Serves a fixed set of records, the built-in seed by default."""

    name = "static"

    def __init__(self, books: tuple[BookRecord, ...] | list[BookRecord] = SEED_BOOKS):
        self._books = tuple(books)

    def load(self) -> list[BookRecord]:
        return list(self._books)


class JsonFileBookSource(BookSource):
    """Reads records from a JSON array of ``{"id", "name", "genre"}`` objects."""

    name = "json_file"

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load(self) -> list[BookRecord]:
        try:
            contents = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise BookSourceReadError(f"Failed to read book file {self.path}: {e}") from e

        try:
            raw = json.loads(contents)
        except json.JSONDecodeError as e:
            raise BookSourceParseError(f"Failed to parse book file {self.path}: {e}") from e

        if not isinstance(raw, list):
            raise BookSourceParseError(
                f"Book file {self.path} must contain a JSON array, got {type(raw).__name__}"
            )

        books: list[BookRecord] = []
        for index, entry in enumerate(raw):
            try:
                books.append(BookRecord.model_validate(entry))
            except ValidationError as e:
                raise BookSourceParseError(
                    f"Invalid book record at index {index} in {self.path}: {e}"
                ) from e

        logger.debug("Loaded books from file", path=str(self.path), count=len(books))
        return books
