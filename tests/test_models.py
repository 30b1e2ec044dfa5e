"""Book model tests"""
import pytest
from pydantic import ValidationError

from library_catalog.models import Book, BookCondition, BookCreate, BookPatch


class TestBookCondition:

    def test_ratings(self):
        assert [c.rating for c in BookCondition] == [5, 4, 3, 2]

    def test_description(self):
        assert BookCondition.FAIR.description == "Moderate wear, still readable"

    def test_unknown_value_rejected(self):
        with pytest.raises(ValueError):
            BookCondition("mint")


class TestBookFromRow:

    def test_nulls_are_mapped(self, row_factory):
        book = Book.from_row(row_factory("b", "Dune", "2024-01-01T00:00:00Z"))

        assert book.description == ""
        assert book.genre is None
        assert book.notes is None
        assert book.created_at.year == 2024

    def test_empty_genre_becomes_none(self, row_factory):
        book = Book.from_row(row_factory("b", "Dune", "2024-01-01T00:00:00Z", genre=""))

        assert book.genre is None

    def test_invalid_condition_rejected(self, row_factory):
        with pytest.raises(ValidationError):
            Book.from_row(row_factory("b", "Dune", "2024-01-01T00:00:00Z", condition="mint"))

    def test_book_is_immutable(self, row_factory):
        book = Book.from_row(row_factory("b", "Dune", "2024-01-01T00:00:00Z"))

        with pytest.raises(ValidationError):
            book.title = "Other"


class TestBookCreate:

    def test_required_fields(self):
        with pytest.raises(ValidationError):
            BookCreate(title="Dune", author="Herbert")

    @pytest.mark.parametrize("field", ["title", "author"])
    def test_blank_title_or_author_rejected(self, field):
        data = {"title": "Dune", "author": "Herbert", "condition": "good", field: "   "}

        with pytest.raises(ValidationError, match="is required"):
            BookCreate(**data)

    def test_title_is_stripped(self):
        fields = BookCreate(title="  Dune ", author="Herbert", condition="good")

        assert fields.title == "Dune"

    def test_to_row_sends_null_for_blank_optionals(self):
        fields = BookCreate(title="Dune", author="Herbert", condition="good",
                            description="", genre="", notes=None)

        assert fields.to_row() == {
            "title": "Dune",
            "author": "Herbert",
            "description": None,
            "genre": None,
            "condition": "good",
            "notes": None,
        }


class TestBookPatch:

    def test_only_provided_fields_in_row(self):
        patch = BookPatch(title="Dune Messiah", condition="fair")

        assert patch.to_row() == {"title": "Dune Messiah", "condition": "fair"}

    def test_empty_string_clears_nullable_field(self):
        assert BookPatch(genre="").to_row() == {"genre": None}

    def test_explicit_none_clears_nullable_field(self):
        assert BookPatch(notes=None).to_row() == {"notes": None}

    def test_from_json_keeps_field_presence(self):
        patch = BookPatch.model_validate({"description": "New blurb"})

        assert patch.to_row() == {"description": "New blurb"}

    def test_empty_patch_rejected(self):
        with pytest.raises(ValidationError, match="at least one field"):
            BookPatch()

    @pytest.mark.parametrize("value", ["", None])
    def test_title_cannot_be_cleared(self, value):
        with pytest.raises(ValidationError):
            BookPatch(title=value)

    def test_condition_cannot_be_cleared(self):
        with pytest.raises(ValidationError, match="cannot be cleared"):
            BookPatch(condition=None)
