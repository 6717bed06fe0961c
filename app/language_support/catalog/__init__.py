"""Language catalog - supported languages and their item tables.

Loads the language document, validates it, and tracks the currently
selected language in a thread-safe way.

Main components:
- models: LanguageDescriptor, CatalogItem, SelectionSnapshot
- store: Catalog (immutable, read-only lookups)
- documents: XML, YAML and in-memory document providers
- loader: CatalogLoader and load_catalog
- selection: SelectionService
- factory: create_catalog and create_selection_service
"""

from language_support.catalog.documents import (
    DocumentProvider,
    MappingDocumentProvider,
    XMLDocumentProvider,
    YAMLDocumentProvider,
    default_document_path,
    provider_for_path,
)
from language_support.catalog.exceptions import (
    CatalogConsistencyError,
    DefaultLanguageNotFoundError,
    DocumentFormatError,
    DuplicateKeyError,
    LanguageSupportError,
    ValidationError,
)
from language_support.catalog.factory import create_catalog, create_selection_service
from language_support.catalog.loader import CatalogLoader, load_catalog
from language_support.catalog.models import (
    CatalogItem,
    LanguageDescriptor,
    SelectionSnapshot,
)
from language_support.catalog.selection import SelectionService
from language_support.catalog.store import Catalog

__all__ = [
    "LanguageDescriptor",
    "CatalogItem",
    "SelectionSnapshot",
    "Catalog",
    "DocumentProvider",
    "XMLDocumentProvider",
    "YAMLDocumentProvider",
    "MappingDocumentProvider",
    "default_document_path",
    "provider_for_path",
    "CatalogLoader",
    "load_catalog",
    "SelectionService",
    "create_catalog",
    "create_selection_service",
    "LanguageSupportError",
    "ValidationError",
    "DuplicateKeyError",
    "CatalogConsistencyError",
    "DefaultLanguageNotFoundError",
    "DocumentFormatError",
]
