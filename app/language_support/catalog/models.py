"""Value types for the language catalog.

LanguageDescriptor and CatalogItem are frozen, so the same instance can be
shared with any caller without exposing catalog internals. SelectionSnapshot
pairs a language with its item table so the two are always replaced together.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional

from language_support.catalog.exceptions import ValidationError


def _is_blank(value: Optional[str]) -> bool:
    return not isinstance(value, str) or not value.strip()


@dataclass(frozen=True)
class LanguageDescriptor:
    """A supported language.

    Equality and hashing use the abbreviation only, since it is the key the
    whole catalog is organized by.

    Attributes:
        abbreviation: Short unique code (e.g., "en", "fr").
        name: Display name (e.g., "English", "Français").

    Raises:
        ValidationError: If either field is None, not a string, empty, or
            whitespace only.
    """

    abbreviation: str
    name: str = field(compare=False)

    def __post_init__(self) -> None:
        if _is_blank(self.abbreviation):
            raise ValidationError("Language abbreviation must be a non-blank string")
        if _is_blank(self.name):
            raise ValidationError("Language name must be a non-blank string")

    def copy(self) -> "LanguageDescriptor":
        """Return a new descriptor with identical field contents."""
        return replace(self)

    def to_dict(self) -> Dict[str, str]:
        return {"abbreviation": self.abbreviation, "name": self.name}

    def __str__(self) -> str:
        return f"{self.name} ({self.abbreviation})"


@dataclass(frozen=True)
class CatalogItem:
    """A single localized string within one language's item table.

    Attributes:
        id: Identifier, unique within its table. May be empty, never None.
        content: Localized text. May be empty or None.

    Raises:
        ValidationError: If id is None, or a field is not a string.
    """

    id: str
    content: Optional[str] = None

    def __post_init__(self) -> None:
        if self.id is None:
            raise ValidationError("Item id must not be None")
        if not isinstance(self.id, str):
            raise ValidationError(f"Item id must be a string, got {type(self.id).__name__}")
        if self.content is not None and not isinstance(self.content, str):
            raise ValidationError(
                f"Content of item '{self.id}' must be a string, got {type(self.content).__name__}"
            )

    def copy(self) -> "CatalogItem":
        """Return a new item with identical field contents."""
        return replace(self)

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {"id": self.id, "content": self.content}


@dataclass(frozen=True)
class SelectionSnapshot:
    """The selected language together with its item table.

    Attributes:
        language: Selected LanguageDescriptor.
        items: Read-only view of the language's item table.
    """

    language: LanguageDescriptor
    items: Mapping[str, CatalogItem]

    # items is a mappingproxy, which cannot be hashed.
    __hash__ = None  # type: ignore[assignment]

    def item_table(self) -> Dict[str, CatalogItem]:
        """Return a fresh dict copy of the item table."""
        return dict(self.items)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "language": self.language.to_dict(),
            "items": {item_id: item.content for item_id, item in self.items.items()},
        }
