"""
Tests for schema construction and start-up validation
"""

import pytest

from bookgraph.catalog import FieldDescription, TypeDescription, describe_book_type
from bookgraph.graphql.schema import check_type_description, schema, validate_schema


def test_validate_schema_passes():
    validate_schema()


def test_book_type_matches_description():
    assert check_type_description(describe_book_type()) == []


def test_sdl_exposes_book_and_query_root():
    sdl = schema.as_str()

    assert "type Book {" in sdl
    assert "id: String" in sdl
    assert "name: String" in sdl
    assert "genre: String" in sdl
    assert "type RootQueryTypes {" in sdl
    assert "book(id: String): Book" in sdl
    assert "= null" not in sdl


def test_query_root_name():
    assert schema._schema.query_type.name == "RootQueryTypes"


@pytest.mark.parametrize(
    "description, expected",
    [
        (
            TypeDescription(
                name="Book",
                fields=(
                    FieldDescription(name="id", type="Int"),
                    FieldDescription(name="name", type="String"),
                    FieldDescription(name="genre", type="String"),
                ),
            ),
            "Book.id is String, expected Int",
        ),
        (
            TypeDescription(
                name="Book",
                fields=(
                    FieldDescription(name="id", type="String"),
                    FieldDescription(name="name", type="String"),
                ),
            ),
            "Book.genre is not described",
        ),
        (
            TypeDescription(name="Author", fields=()),
            "Type 'Author' is not an object type in the schema",
        ),
    ],
)
def test_mismatched_descriptions_are_reported(description, expected):
    assert expected in check_type_description(description)
