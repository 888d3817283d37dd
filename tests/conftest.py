"""
Shared pytest fixtures and configuration for all tests.
"""

import json
import os
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest

from bookgraph.catalog import SEED_BOOKS, BookCatalog


@pytest.fixture
def catalog() -> BookCatalog:
    """Catalog over the built-in seed records."""
    return BookCatalog(SEED_BOOKS)


@pytest.fixture
def books_file(tmp_path: Path) -> Path:
    """A JSON data file with numeric and string ids."""
    path = tmp_path / "books.json"
    path.write_text(
        json.dumps(
            [
                {"id": 1, "name": "Rust Basics", "genre": "Programming"},
                {"id": "2", "name": "Async in Rust", "genre": "Programming"},
            ]
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
