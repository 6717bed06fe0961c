"""In-memory language catalog.

Holds the supported-language set and, per language, its item table. A
Catalog is built once by the loader and never mutated afterwards; read
operations hand out fresh copies or read-only views.
"""

from types import MappingProxyType
from typing import Dict, FrozenSet, List, Mapping, Optional

from language_support.catalog.exceptions import DefaultLanguageNotFoundError
from language_support.catalog.models import CatalogItem, LanguageDescriptor


class Catalog:
    """Immutable catalog of languages and their item tables.

    Attributes:
        languages: Read-only mapping abbreviation -> LanguageDescriptor.
        item_tables: Read-only mapping abbreviation -> read-only item table.
        default_abbreviation: Abbreviation of the default language.
        orphan_abbreviations: Item tables kept without a declared language
            (only possible when the loader runs in permissive mode).
    """

    def __init__(
        self,
        languages: Mapping[str, LanguageDescriptor],
        item_tables: Mapping[str, Mapping[str, CatalogItem]],
        default_abbreviation: str,
    ):
        if default_abbreviation not in languages or default_abbreviation not in item_tables:
            raise DefaultLanguageNotFoundError(default_abbreviation)

        self._languages: Mapping[str, LanguageDescriptor] = MappingProxyType(
            dict(languages)
        )
        self._item_tables: Mapping[str, Mapping[str, CatalogItem]] = MappingProxyType(
            {
                abbreviation: MappingProxyType(dict(items))
                for abbreviation, items in item_tables.items()
            }
        )
        self._default_abbreviation = default_abbreviation

    @property
    def languages(self) -> Mapping[str, LanguageDescriptor]:
        return self._languages

    @property
    def item_tables(self) -> Mapping[str, Mapping[str, CatalogItem]]:
        return self._item_tables

    @property
    def default_abbreviation(self) -> str:
        return self._default_abbreviation

    @property
    def orphan_abbreviations(self) -> FrozenSet[str]:
        return frozenset(self._item_tables) - frozenset(self._languages)

    def list_languages(self) -> List[LanguageDescriptor]:
        """Get all registered languages.

        Returns:
            New list of LanguageDescriptor, in document order.
        """
        return list(self._languages.values())

    def get_language(self, abbreviation: str) -> Optional[LanguageDescriptor]:
        """Get a language by abbreviation.

        Returns:
            LanguageDescriptor if registered, None otherwise.
        """
        return self._languages.get(abbreviation)

    def has_language(self, abbreviation: str) -> bool:
        return abbreviation in self._languages

    def get_item_table(self, abbreviation: str) -> Optional[Dict[str, CatalogItem]]:
        """Get a copy of the item table for a language.

        Args:
            abbreviation: Language abbreviation.

        Returns:
            New dict mapping item id -> CatalogItem, or None if no table is
            registered under the abbreviation.
        """
        items = self._item_tables.get(abbreviation)
        if items is None:
            return None
        return dict(items)

    def item_view(self, abbreviation: str) -> Optional[Mapping[str, CatalogItem]]:
        """Get the read-only item table for a language without copying."""
        return self._item_tables.get(abbreviation)

    def get_default_language(self) -> LanguageDescriptor:
        return self._languages[self._default_abbreviation]

    def get_default_item_table(self) -> Dict[str, CatalogItem]:
        """Get a copy of the default language's item table.

        Always succeeds: the default's presence is checked at construction.
        """
        return dict(self._item_tables[self._default_abbreviation])

    def __contains__(self, abbreviation: object) -> bool:
        return abbreviation in self._languages

    def __len__(self) -> int:
        return len(self._languages)

    def __repr__(self) -> str:
        return (
            f"Catalog(languages={list(self._languages)!r}, "
            f"default={self._default_abbreviation!r})"
        )
