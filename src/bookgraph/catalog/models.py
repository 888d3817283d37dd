"""
Book record model and the structural description of the Book type
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class BookRecord(BaseModel):
    """A single, immutable catalog entry."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    genre: str

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_numeric_id(cls, value: Any) -> Any:
        # Data files may carry numeric ids; lookups always compare strings
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class FieldDescription(BaseModel):
    """One field of a described type."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: str


class TypeDescription(BaseModel):
    """Field-level shape of a record type, for schema validation layers."""

    model_config = ConfigDict(frozen=True)

    name: str
    fields: tuple[FieldDescription, ...]

    def field_names(self) -> list[str]:
        return [field.name for field in self.fields]


BOOK_TYPE_DESCRIPTION = TypeDescription(
    name="Book",
    fields=(
        FieldDescription(name="id", type="String"),
        FieldDescription(name="name", type="String"),
        FieldDescription(name="genre", type="String"),
    ),
)


def describe_book_type() -> TypeDescription:
    """Return the structural description of the Book record."""
    return BOOK_TYPE_DESCRIPTION
