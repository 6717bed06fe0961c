"""Language document loading and validation.

Turns the parsed language document into an immutable Catalog and enforces
the cross-referential rules between its sections. Any failure aborts the
load; callers never receive a partially built catalog.
"""

from typing import Any, Dict, List, Mapping, Optional

from language_support.catalog.documents import (
    DEFAULT,
    ITEM_DETAILS,
    LANGUAGE_SUPPORT,
    SETTINGS,
    DocumentProvider,
)
from language_support.catalog.exceptions import (
    CatalogConsistencyError,
    DefaultLanguageNotFoundError,
    DocumentFormatError,
    DuplicateKeyError,
    ValidationError,
)
from language_support.catalog.models import CatalogItem, LanguageDescriptor
from language_support.catalog.store import Catalog
from language_support.logging import get_module_logger

logger = get_module_logger()


class CatalogLoader:
    """Builds a Catalog from a parsed language document.

    Attributes:
        strict_consistency: When True, item lists for languages missing from
            LanguageSupport are rejected. When False they are kept (reachable
            through Catalog.get_item_table) and logged as warnings.
    """

    def __init__(self, strict_consistency: bool = True):
        self.strict_consistency = strict_consistency

    def load(self, document: Mapping[str, Any]) -> Catalog:
        """Load and validate a language document.

        Args:
            document: Parsed document tree with LanguageSupport, ItemDetails
                and Settings sections.

        Returns:
            Immutable Catalog.

        Raises:
            DocumentFormatError: If a section is missing or malformed.
            ValidationError: If a language or item entry has an invalid field.
            DuplicateKeyError: If an abbreviation or item id repeats.
            CatalogConsistencyError: If languages and item lists do not match.
            DefaultLanguageNotFoundError: If the default is not registered.
        """
        if not isinstance(document, Mapping):
            logger.error("invalid_language_document", type=type(document).__name__)
            raise DocumentFormatError("Language document must be a mapping")

        languages = self._read_languages(_section(document, LANGUAGE_SUPPORT, list))
        item_tables = self._read_item_details(_section(document, ITEM_DETAILS, list))
        self._check_consistency(languages, item_tables)
        default_abbreviation = self._read_default(
            _section(document, SETTINGS, Mapping), languages, item_tables
        )

        catalog = Catalog(languages, item_tables, default_abbreviation)
        logger.info(
            "catalog_loaded",
            language_count=len(languages),
            item_table_count=len(item_tables),
            default_language=default_abbreviation,
        )
        return catalog

    def load_from(self, provider: DocumentProvider) -> Catalog:
        """Read a document from ``provider`` and load it."""
        return self.load(provider.read())

    def _read_languages(
        self, entries: List[Any]
    ) -> Dict[str, LanguageDescriptor]:
        languages: Dict[str, LanguageDescriptor] = {}
        for entry in entries:
            entry = _entry(entry, LANGUAGE_SUPPORT)
            try:
                language = LanguageDescriptor(
                    abbreviation=entry.get("abbreviation"),
                    name=entry.get("name"),
                )
            except ValidationError as e:
                logger.error("invalid_language_entry", entry=dict(entry), error=str(e))
                raise
            if language.abbreviation in languages:
                logger.error(
                    "duplicate_language",
                    abbreviation=language.abbreviation,
                )
                raise DuplicateKeyError(language.abbreviation, LANGUAGE_SUPPORT)
            languages[language.abbreviation] = language
        return languages

    def _read_item_details(
        self, item_lists: List[Any]
    ) -> Dict[str, Dict[str, CatalogItem]]:
        item_tables: Dict[str, Dict[str, CatalogItem]] = {}
        for item_list in item_lists:
            item_list = _entry(item_list, ITEM_DETAILS)
            abbreviation = item_list.get("language")
            if not isinstance(abbreviation, str):
                logger.error("item_list_missing_language", keys=list(item_list))
                raise DocumentFormatError("ItemList entry is missing its language")
            if abbreviation in item_tables:
                logger.error("duplicate_item_list", language=abbreviation)
                raise DuplicateKeyError(abbreviation, ITEM_DETAILS)

            scope = f"ItemList[{abbreviation}]"
            items: Dict[str, CatalogItem] = {}
            for entry in item_list.get("items") or []:
                entry = _entry(entry, scope)
                try:
                    item = CatalogItem(id=entry.get("id"), content=entry.get("content"))
                except ValidationError as e:
                    logger.error(
                        "invalid_item_entry",
                        language=abbreviation,
                        entry=dict(entry),
                        error=str(e),
                    )
                    raise
                if item.id in items:
                    logger.error(
                        "duplicate_item", language=abbreviation, item_id=item.id
                    )
                    raise DuplicateKeyError(item.id, scope)
                items[item.id] = item

            item_tables[abbreviation] = items
        return item_tables

    def _check_consistency(
        self,
        languages: Mapping[str, LanguageDescriptor],
        item_tables: Mapping[str, Mapping[str, CatalogItem]],
    ) -> None:
        missing = set(languages) - set(item_tables)
        orphans = set(item_tables) - set(languages)

        if orphans and not self.strict_consistency:
            logger.warning("orphan_item_lists_accepted", languages=sorted(orphans))
            orphans = set()

        if missing or orphans:
            logger.error(
                "catalog_inconsistent",
                missing_item_tables=sorted(missing),
                orphan_item_tables=sorted(orphans),
            )
            raise CatalogConsistencyError(missing, orphans)

    def _read_default(
        self,
        settings: Mapping[str, Any],
        languages: Mapping[str, LanguageDescriptor],
        item_tables: Mapping[str, Mapping[str, CatalogItem]],
    ) -> str:
        default = settings.get(DEFAULT)
        if not isinstance(default, Mapping):
            logger.error("missing_default_language_entry")
            raise DocumentFormatError(
                f"Language document is missing the '{SETTINGS}.{DEFAULT}' entry"
            )

        abbreviation: Optional[str] = default.get("language")
        if (
            not isinstance(abbreviation, str)
            or abbreviation not in languages
            or abbreviation not in item_tables
        ):
            logger.error("default_language_not_found", abbreviation=abbreviation)
            raise DefaultLanguageNotFoundError(abbreviation)
        return abbreviation


def load_catalog(
    document: Mapping[str, Any], strict_consistency: bool = True
) -> Catalog:
    """Load a Catalog from a parsed language document.

    Args:
        document: Parsed document tree.
        strict_consistency: Reject item lists with no declared language.

    Returns:
        Immutable Catalog.
    """
    return CatalogLoader(strict_consistency=strict_consistency).load(document)


def _section(document: Mapping[str, Any], name: str, expected: type) -> Any:
    if name not in document or document[name] is None:
        logger.error("missing_section", section=name)
        raise DocumentFormatError(f"Language document is missing the '{name}' section")
    section = document[name]
    if not isinstance(section, expected):
        logger.error("invalid_section", section=name, type=type(section).__name__)
        raise DocumentFormatError(
            f"Section '{name}' has unexpected type {type(section).__name__}"
        )
    return section


def _entry(entry: Any, scope: str) -> Mapping[str, Any]:
    if not isinstance(entry, Mapping):
        logger.error("invalid_entry", scope=scope, type=type(entry).__name__)
        raise DocumentFormatError(
            f"Entry in {scope} must be a mapping, got {type(entry).__name__}"
        )
    return entry
