"""Exceptions raised while building the language catalog.

Every load-time failure derives from LanguageSupportError and is fatal:
no partially built catalog is ever handed out. Runtime lookup misses
(unknown abbreviation) are not exceptions; they are reported through
return values (None / False).
"""

from typing import Iterable, Optional, Tuple


class LanguageSupportError(Exception):
    """Base exception for all language catalog errors.

    Example:
        try:
            service = create_selection_service()
        except LanguageSupportError as e:
            logger.error("language_catalog_unavailable", error=str(e))
            raise
    """

    pass


class ValidationError(LanguageSupportError):
    """Raised when an entity violates a field constraint.

    Example:
        >>> LanguageDescriptor(abbreviation="en", name="  ")
        Traceback (most recent call last):
        ...
        ValidationError: Language name must be a non-blank string
    """

    pass


class DuplicateKeyError(LanguageSupportError):
    """Raised when a key repeats while the catalog is being loaded.

    Attributes:
        key: The repeated key.
        scope: Where the key repeated ("LanguageSupport", "ItemDetails" or
            "ItemList[<abbreviation>]").
    """

    def __init__(self, key: Optional[str], scope: str):
        self.key = key
        self.scope = scope
        super().__init__(f"Duplicate key '{key}' in {scope}")


class CatalogConsistencyError(LanguageSupportError):
    """Raised when declared languages and item lists do not match up.

    Attributes:
        missing_item_tables: Languages declared without an item list.
        orphan_item_tables: Item lists whose language is not declared.
    """

    def __init__(
        self,
        missing_item_tables: Iterable[str] = (),
        orphan_item_tables: Iterable[str] = (),
    ):
        self.missing_item_tables: Tuple[str, ...] = tuple(sorted(missing_item_tables))
        self.orphan_item_tables: Tuple[str, ...] = tuple(sorted(orphan_item_tables))

        parts = []
        if self.missing_item_tables:
            parts.append(
                "languages without an item list: "
                + ", ".join(self.missing_item_tables)
            )
        if self.orphan_item_tables:
            parts.append(
                "item lists without a declared language: "
                + ", ".join(self.orphan_item_tables)
            )
        super().__init__("Catalog is inconsistent - " + "; ".join(parts))


class DefaultLanguageNotFoundError(LanguageSupportError):
    """Raised when Settings.Default names a language that is not registered.

    Attributes:
        abbreviation: The configured default abbreviation (may be None).
    """

    def __init__(self, abbreviation: Optional[str]):
        self.abbreviation = abbreviation
        super().__init__(
            f"Default language '{abbreviation}' is not in the language support list"
        )


class DocumentFormatError(LanguageSupportError):
    """Raised when the language document cannot be parsed or lacks a section.

    Example:
        >>> CatalogLoader().load({"LanguageSupport": []})
        Traceback (most recent call last):
        ...
        DocumentFormatError: Language document is missing the 'ItemDetails' section
    """

    pass
