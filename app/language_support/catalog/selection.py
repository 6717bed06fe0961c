"""Thread-safe selection of the active language.

The selected language and its item table are held together in one
SelectionSnapshot. set_language builds a new snapshot and swaps it in under
the lock, so a reader can never see a language paired with another
language's items.
"""

import threading
from typing import Dict

from language_support.catalog.models import (
    CatalogItem,
    LanguageDescriptor,
    SelectionSnapshot,
)
from language_support.catalog.store import Catalog
from language_support.logging import get_module_logger

logger = get_module_logger()


class SelectionService:
    """Holds the currently selected language over a loaded Catalog.

    Safe for any number of concurrent readers and writers. The catalog
    itself is immutable; only the selection snapshot changes.

    Usage:
        catalog = load_catalog(document)
        service = SelectionService(catalog)

        if not service.set_language("fr"):
            logger.info("language_unavailable", language="fr")

        snapshot = service.snapshot()
        greeting = snapshot.items["greet"].content

    Attributes:
        catalog: The read-only Catalog this service selects from.
    """

    def __init__(self, catalog: Catalog):
        self._catalog = catalog
        self._lock = threading.Lock()
        self._snapshot = self._default_snapshot()
        logger.info(
            "selection_service_initialized",
            default_language=catalog.default_abbreviation,
        )

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def snapshot(self) -> SelectionSnapshot:
        """Get the current language and item table as one consistent pair."""
        with self._lock:
            return self._snapshot

    def current_language(self) -> LanguageDescriptor:
        return self.snapshot().language

    def current_item_table(self) -> Dict[str, CatalogItem]:
        """Get a copy of the item table of the selected language."""
        return self.snapshot().item_table()

    def set_language(self, abbreviation: str) -> bool:
        """Select a language.

        Args:
            abbreviation: Abbreviation of a registered language.

        Returns:
            True if the selection changed to the language, False if the
            abbreviation is not registered. On False the selection is left
            exactly as it was.
        """
        with self._lock:
            language = self._catalog.get_language(abbreviation)
            items = self._catalog.item_view(abbreviation)
            if language is None or items is None:
                logger.info(
                    "language_not_found",
                    abbreviation=abbreviation,
                    current_language=self._snapshot.language.abbreviation,
                )
                return False

            previous = self._snapshot.language.abbreviation
            self._snapshot = SelectionSnapshot(language=language, items=items)

        logger.info("language_selected", language=abbreviation, previous=previous)
        return True

    def reset(self) -> None:
        """Select the catalog's default language again."""
        with self._lock:
            self._snapshot = self._default_snapshot()
        logger.info("language_selection_reset")

    def default_language(self) -> LanguageDescriptor:
        return self._catalog.get_default_language()

    def default_item_table(self) -> Dict[str, CatalogItem]:
        return self._catalog.get_default_item_table()

    def _default_snapshot(self) -> SelectionSnapshot:
        abbreviation = self._catalog.default_abbreviation
        return SelectionSnapshot(
            language=self._catalog.get_language(abbreviation),
            items=self._catalog.item_view(abbreviation),
        )
