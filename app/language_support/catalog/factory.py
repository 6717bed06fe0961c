"""Factory functions for creating catalog components.

Wires a document provider, the loader and the selection service together
from application settings.
"""

from typing import Optional

from language_support.catalog.documents import DocumentProvider, provider_for_path
from language_support.catalog.loader import CatalogLoader
from language_support.catalog.selection import SelectionService
from language_support.catalog.store import Catalog
from language_support.configuration import LanguageSettings
from language_support.logging import get_module_logger

logger = get_module_logger()


def create_catalog(
    provider: Optional[DocumentProvider] = None,
    language_settings: Optional[LanguageSettings] = None,
) -> Catalog:
    """Load a Catalog.

    Args:
        provider: Document provider (default: derived from settings, which
            fall back to the bundled language.xml).
        language_settings: Language settings (default: read from environment).

    Returns:
        Catalog: Loaded, validated catalog.

    Raises:
        LanguageSupportError: If the document is invalid.
        FileNotFoundError: If the configured document does not exist.

    Usage:
        # Bundled document
        catalog = create_catalog()

        # Custom document
        catalog = create_catalog(provider=YAMLDocumentProvider("/etc/app/language.yml"))
    """
    language_settings = language_settings or LanguageSettings()
    if provider is None:
        provider = provider_for_path(
            language_settings.document_path,
            document_format=language_settings.document_format,
        )

    loader = CatalogLoader(strict_consistency=language_settings.strict_consistency)
    catalog = loader.load_from(provider)
    logger.info(
        "catalog_created",
        provider=repr(provider),
        strict_consistency=language_settings.strict_consistency,
    )
    return catalog


def create_selection_service(
    provider: Optional[DocumentProvider] = None,
    language_settings: Optional[LanguageSettings] = None,
) -> SelectionService:
    """Load a Catalog and create a SelectionService over it.

    Nothing is constructed if loading fails; the error propagates.

    Usage:
        service = create_selection_service()
        service.set_language("fr")
    """
    return SelectionService(create_catalog(provider, language_settings))
