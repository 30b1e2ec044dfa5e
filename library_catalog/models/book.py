"""Book entity and input models."""

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class BookCondition(str, Enum):
    """Physical condition of a copy."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"

    @property
    def rating(self) -> int:
        """Star rating shown next to the condition (out of 5)."""
        return _CONDITION_RATINGS[self]

    @property
    def description(self) -> str:
        return _CONDITION_DESCRIPTIONS[self]


_CONDITION_RATINGS = {
    BookCondition.EXCELLENT: 5,
    BookCondition.GOOD: 4,
    BookCondition.FAIR: 3,
    BookCondition.POOR: 2,
}

_CONDITION_DESCRIPTIONS = {
    BookCondition.EXCELLENT: "Like new, no visible wear",
    BookCondition.GOOD: "Minor wear, well-maintained",
    BookCondition.FAIR: "Moderate wear, still readable",
    BookCondition.POOR: "Heavy wear, but functional",
}

NULLABLE_FIELDS = ("description", "genre", "notes")


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    return value


def _require_text(value: Optional[str], label: str) -> str:
    if value is None or not value.strip():
        raise ValueError(f"{label} is required")
    return value.strip()


class Book(BaseModel):
    """A book as stored in the ``books`` table."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Book ID (UUID), assigned by storage")
    title: str
    author: str
    description: str = ""
    genre: Optional[str] = None
    condition: BookCondition
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Book":
        """Build a Book from a raw table row.

        ``null`` description becomes ``""``; ``null`` or empty genre/notes
        become ``None``.
        """
        return cls(
            id=str(row["id"]),
            title=row["title"],
            author=row["author"],
            description=row.get("description") or "",
            genre=row.get("genre") or None,
            condition=row["condition"],
            notes=row.get("notes") or None,
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )


class BookCreate(BaseModel):
    """Fields accepted when adding a book."""

    title: str = Field(..., max_length=500)
    author: str = Field(..., max_length=500)
    condition: BookCondition
    description: Optional[str] = None
    genre: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        return _require_text(v, "Title")

    @field_validator("author")
    @classmethod
    def validate_author(cls, v: str) -> str:
        return _require_text(v, "Author")

    @field_validator(*NULLABLE_FIELDS)
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        return _blank_to_none(v)

    def to_row(self) -> dict[str, Any]:
        """Row payload for insert. Empty optional fields are sent as null."""
        return {
            "title": self.title,
            "author": self.author,
            "description": self.description,
            "genre": self.genre,
            "condition": self.condition.value,
            "notes": self.notes,
        }


class BookPatch(BaseModel):
    """Partial update of a book.

    Only fields that were explicitly provided are part of the patch. For
    description, genre and notes an explicit ``None`` or ``""`` clears the
    column.
    """

    title: Optional[str] = Field(None, max_length=500)
    author: Optional[str] = Field(None, max_length=500)
    condition: Optional[BookCondition] = None
    description: Optional[str] = None
    genre: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: Optional[str]) -> str:
        return _require_text(v, "Title")

    @field_validator("author")
    @classmethod
    def validate_author(cls, v: Optional[str]) -> str:
        return _require_text(v, "Author")

    @field_validator("condition")
    @classmethod
    def validate_condition(cls, v: Optional[BookCondition]) -> BookCondition:
        if v is None:
            raise ValueError("Condition cannot be cleared")
        return v

    @field_validator(*NULLABLE_FIELDS)
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        return _blank_to_none(v)

    @model_validator(mode="after")
    def check_not_empty(self) -> "BookPatch":
        if not self.model_fields_set:
            raise ValueError("Patch must set at least one field")
        return self

    def to_row(self) -> dict[str, Any]:
        """Row payload for update, limited to the provided fields."""
        row = self.model_dump(include=self.model_fields_set)
        if "condition" in row:
            row["condition"] = self.condition.value
        return row
