"""The book record shared by the services, with its JSON and MongoDB forms."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping

_FIELDS = ("id", "title", "author", "edition", "pages", "year")

_DOCUMENT_KEYS = {
    "id": "ID",
    "title": "BookName",
    "author": "BookAuthor",
    "edition": "BookEdition",
    "pages": "BookPages",
    "year": "BookYear",
}

_OMIT_EMPTY = frozenset({"edition", "pages", "year"})


def _checked(name: str, value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {name!r} must be a string, not {type(value).__name__}")
    return value


@dataclass
class Book:
    """A book as stored in the collection and exchanged over HTTP."""

    id: str = ""
    title: str = ""
    author: str = ""
    edition: str = ""
    pages: str = ""
    year: str = ""

    @classmethod
    def from_json(cls, data: Any) -> "Book":
        """Build a book from a decoded JSON value.

        Keys match field names without regard to case, unknown keys are
        ignored and ``null`` leaves a field empty. Anything other than an
        object (or ``null``), or a non-string field value, raises ValueError.
        """
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ValueError("book must be a JSON object")
        values: dict[str, str] = {}
        for key, value in data.items():
            field = str(key).lower()
            if field not in _FIELDS or value is None:
                continue
            values[field] = _checked(key, value)
        return cls(**values)

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "Book":
        """Build a book from a MongoDB document; missing keys stay empty."""
        return cls(
            **{
                field: _checked(key, document.get(key))
                for field, key in _DOCUMENT_KEYS.items()
            }
        )

    def to_json(self) -> dict[str, str]:
        """The JSON form, leaving out empty edition, pages and year."""
        return {
            field: value
            for field, value in asdict(self).items()
            if value or field not in _OMIT_EMPTY
        }

    def to_document(self) -> dict[str, str]:
        """The MongoDB form, leaving out empty edition, pages and year."""
        return {
            _DOCUMENT_KEYS[field]: value
            for field, value in asdict(self).items()
            if value or field not in _OMIT_EMPTY
        }

    def as_listing(self) -> dict[str, str]:
        """The form used in book listings: every field, empty or not."""
        return asdict(self)