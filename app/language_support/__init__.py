"""Language support - a static catalog of supported languages and their strings.

Example:
    from language_support import create_selection_service

    service = create_selection_service()
    service.set_language("fr")
    greeting = service.current_item_table()["greet"].content
"""

from language_support.catalog import (
    Catalog,
    CatalogItem,
    LanguageDescriptor,
    LanguageSupportError,
    SelectionService,
    create_catalog,
    create_selection_service,
    load_catalog,
)

__version__ = "1.0.0"

__all__ = [
    "Catalog",
    "CatalogItem",
    "LanguageDescriptor",
    "LanguageSupportError",
    "SelectionService",
    "create_catalog",
    "create_selection_service",
    "load_catalog",
]
