"""Tests for language_support.catalog.models module."""

from dataclasses import FrozenInstanceError
from types import MappingProxyType

import pytest

from language_support.catalog.exceptions import LanguageSupportError, ValidationError
from language_support.catalog.models import (
    CatalogItem,
    LanguageDescriptor,
    SelectionSnapshot,
)
from tests.factories.catalog import make_item, make_language


@pytest.mark.unit
class TestLanguageDescriptor:
    """Tests for LanguageDescriptor."""

    def test_creation(self):
        """LanguageDescriptor stores abbreviation and name."""
        language = LanguageDescriptor(abbreviation="fr", name="Français")
        assert language.abbreviation == "fr"
        assert language.name == "Français"

    @pytest.mark.parametrize("abbreviation", [None, "", "   ", "\t\n"])
    def test_blank_abbreviation_rejected(self, abbreviation):
        """Blank or missing abbreviation raises ValidationError."""
        with pytest.raises(ValidationError):
            LanguageDescriptor(abbreviation=abbreviation, name="English")

    @pytest.mark.parametrize("name", [None, "", "  "])
    def test_blank_name_rejected(self, name):
        """Blank or missing name raises ValidationError."""
        with pytest.raises(ValidationError):
            LanguageDescriptor(abbreviation="en", name=name)

    def test_non_string_abbreviation_rejected(self):
        """A YAML boolean (e.g. unquoted 'no') is not a valid abbreviation."""
        with pytest.raises(ValidationError):
            LanguageDescriptor(abbreviation=False, name="Norsk")

    def test_validation_error_is_language_support_error(self):
        """ValidationError belongs to the LanguageSupportError hierarchy."""
        with pytest.raises(LanguageSupportError):
            LanguageDescriptor(abbreviation="", name="")

    def test_immutable(self):
        """Fields cannot be reassigned."""
        language = make_language()
        with pytest.raises(FrozenInstanceError):
            language.name = "Anglais"

    def test_equality_by_abbreviation(self):
        """Descriptors with the same abbreviation are equal and hash alike."""
        first = LanguageDescriptor("en", "English")
        second = LanguageDescriptor("en", "Anglais")
        assert first == second
        assert hash(first) == hash(second)
        assert first != LanguageDescriptor("fr", "English")

    def test_copy(self):
        """copy() returns an equal but distinct instance."""
        language = make_language("fr", "Français")
        copied = language.copy()
        assert copied is not language
        assert copied.abbreviation == language.abbreviation
        assert copied.name == language.name

    def test_to_dict(self):
        """to_dict() renders both fields."""
        assert make_language().to_dict() == {"abbreviation": "en", "name": "English"}

    def test_str(self):
        """__str__() shows name and abbreviation."""
        assert str(make_language()) == "English (en)"


@pytest.mark.unit
class TestCatalogItem:
    """Tests for CatalogItem."""

    def test_creation(self):
        """CatalogItem stores id and content."""
        item = CatalogItem(id="greet", content="Hello")
        assert item.id == "greet"
        assert item.content == "Hello"

    def test_empty_id_allowed(self):
        """An empty id is valid."""
        assert CatalogItem(id="", content="x").id == ""

    def test_none_content_allowed(self):
        """Content may be None or empty."""
        assert CatalogItem(id="a").content is None
        assert CatalogItem(id="a", content="").content == ""

    def test_none_id_rejected(self):
        """None id raises ValidationError."""
        with pytest.raises(ValidationError):
            CatalogItem(id=None, content="Hello")

    def test_non_string_fields_rejected(self):
        """Non-string id or content raises ValidationError."""
        with pytest.raises(ValidationError):
            CatalogItem(id=404, content="Not found")
        with pytest.raises(ValidationError):
            CatalogItem(id="answer", content=42)

    def test_immutable(self):
        """Fields cannot be reassigned."""
        item = make_item()
        with pytest.raises(FrozenInstanceError):
            item.content = "Bye"

    def test_copy(self):
        """copy() returns an equal but distinct instance."""
        item = make_item("greet", "Hello")
        copied = item.copy()
        assert copied is not item
        assert copied == item
        assert copied.id == "greet"
        assert copied.content == "Hello"

    def test_copy_preserves_none_content(self):
        """copy() keeps None content."""
        assert make_item("empty", None).copy().content is None


@pytest.mark.unit
class TestSelectionSnapshot:
    """Tests for SelectionSnapshot."""

    def test_item_table_returns_fresh_dict(self):
        """item_table() returns a new dict each call."""
        items = MappingProxyType({"greet": make_item()})
        snapshot = SelectionSnapshot(language=make_language(), items=items)

        table = snapshot.item_table()
        table["extra"] = make_item("extra", "x")

        assert "extra" not in snapshot.items
        assert snapshot.item_table() is not snapshot.item_table()

    def test_to_dict(self):
        """to_dict() renders language and item contents."""
        snapshot = SelectionSnapshot(
            language=make_language("fr", "Français"),
            items=MappingProxyType({"greet": make_item("greet", "Bonjour")}),
        )
        assert snapshot.to_dict() == {
            "language": {"abbreviation": "fr", "name": "Français"},
            "items": {"greet": "Bonjour"},
        }

    def test_immutable(self):
        """The language/items pair cannot be reassigned piecemeal."""
        snapshot = SelectionSnapshot(language=make_language(), items=MappingProxyType({}))
        with pytest.raises(FrozenInstanceError):
            snapshot.language = make_language("fr", "Français")

    def test_not_hashable(self):
        """Snapshots compare by value but cannot be hashed."""
        items = MappingProxyType({"greet": make_item("greet", "Hello")})
        snapshot = SelectionSnapshot(language=make_language(), items=items)
        same = SelectionSnapshot(language=make_language(), items=items)

        assert snapshot == same
        with pytest.raises(TypeError):
            hash(snapshot)
