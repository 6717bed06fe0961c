"""Language document providers.

A provider reads the language document from some source and returns the
parsed tree the loader consumes:

    {
        "LanguageSupport": [{"abbreviation": "en", "name": "English"}, ...],
        "ItemDetails": [
            {"language": "en", "items": [{"id": "greet", "content": "Hello"}, ...]},
            ...
        ],
        "Settings": {"Default": {"language": "en"}},
    }

Providers only translate the on-disk format into this shape; all validation
happens in the loader.
"""

import copy
import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml

from language_support.catalog.exceptions import DocumentFormatError
from language_support.logging import get_module_logger

logger = get_module_logger()

LANGUAGE_SUPPORT = "LanguageSupport"
ITEM_DETAILS = "ItemDetails"
SETTINGS = "Settings"
DEFAULT = "Default"

XML_SUFFIXES = (".xml",)
YAML_SUFFIXES = (".yml", ".yaml")


def default_document_path() -> Path:
    """Path of the language document bundled with the package."""
    return Path(__file__).resolve().parents[1] / "resources" / "language.xml"


class DocumentProvider(ABC):
    """Abstract source of the parsed language document."""

    @abstractmethod
    def read(self) -> Dict[str, Any]:
        """Read and parse the language document.

        Returns:
            Parsed document tree.

        Raises:
            DocumentFormatError: If the document cannot be parsed.
        """
        pass


class FileDocumentProvider(DocumentProvider):
    """Base for providers reading a single file.

    Attributes:
        path: Path to the language document.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

        if not self.path.is_file():
            raise FileNotFoundError(f"Language document not found: {self.path}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.path)!r})"


class XMLDocumentProvider(FileDocumentProvider):
    """Reads the XML language document.

    Expected format:
        <Language>
          <LanguageSupport>
            <Language abbreviation="en" name="English" />
          </LanguageSupport>
          <ItemDetails>
            <ItemList language="en">
              <Item id="greet" content="Hello" />
            </ItemList>
          </ItemDetails>
          <Settings>
            <Default language="en" />
          </Settings>
        </Language>

    Sections are found anywhere below the root element. Missing attributes
    read as empty strings.
    """

    def read(self) -> Dict[str, Any]:
        try:
            root = ET.parse(self.path).getroot()
        except ET.ParseError as e:
            logger.error("xml_parse_error", file=str(self.path), error=str(e))
            raise DocumentFormatError(f"Failed to parse {self.path}: {e}") from e

        document = parse_xml_root(root)
        logger.info("read_language_document", file=str(self.path), format="xml")
        return document


def parse_xml_root(root: ET.Element) -> Dict[str, Any]:
    """Convert the XML root element into the parsed document tree.

    Sections that are absent from the XML are absent from the result, so the
    loader can report them.
    """
    document: Dict[str, Any] = {}

    support = root.find(f".//{LANGUAGE_SUPPORT}")
    if support is not None:
        document[LANGUAGE_SUPPORT] = [
            {
                "abbreviation": entry.get("abbreviation", ""),
                "name": entry.get("name", ""),
            }
            for entry in support
        ]

    details = root.find(f".//{ITEM_DETAILS}")
    if details is not None:
        item_lists: List[Dict[str, Any]] = []
        for item_list in details.iter("ItemList"):
            item_lists.append(
                {
                    "language": item_list.get("language", ""),
                    "items": [
                        {"id": item.get("id", ""), "content": item.get("content", "")}
                        for item in item_list.iter("Item")
                    ],
                }
            )
        document[ITEM_DETAILS] = item_lists

    settings = root.find(f".//{SETTINGS}")
    if settings is not None:
        section: Dict[str, Any] = {}
        default = settings.find(f".//{DEFAULT}")
        if default is not None:
            section[DEFAULT] = {"language": default.get("language", "")}
        document[SETTINGS] = section

    return document


class YAMLDocumentProvider(FileDocumentProvider):
    """Reads the YAML language document.

    Expected format:
        LanguageSupport:
          - abbreviation: en
            name: English
        ItemDetails:
          - language: en
            items:
              - id: greet
                content: Hello
        Settings:
          Default:
            language: en
    """

    def read(self) -> Dict[str, Any]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(self.path), error=str(e))
            raise DocumentFormatError(f"Failed to parse {self.path}: {e}") from e

        if not isinstance(data, dict):
            logger.error("invalid_yaml_format", file=str(self.path), expected="dict")
            raise DocumentFormatError(
                f"Language document {self.path} must be a mapping at the top level"
            )

        logger.info("read_language_document", file=str(self.path), format="yaml")
        return data


class MappingDocumentProvider(DocumentProvider):
    """Serves an already parsed document held in memory."""

    def __init__(self, document: Mapping[str, Any]):
        self._document = document

    def read(self) -> Dict[str, Any]:
        return copy.deepcopy(dict(self._document))


def provider_for_path(
    path: Optional[Union[str, Path]] = None,
    document_format: str = "auto",
) -> DocumentProvider:
    """Create the provider matching a document path.

    Args:
        path: Document path. Defaults to the bundled language.xml.
        document_format: "auto" to choose by suffix, or "xml" / "yaml".

    Returns:
        DocumentProvider for the file.

    Raises:
        ValueError: If the format is unknown or cannot be inferred.
        FileNotFoundError: If the file does not exist.
    """
    resolved = Path(path) if path is not None else default_document_path()
    fmt = document_format.lower()

    if fmt == "auto":
        suffix = resolved.suffix.lower()
        if suffix in XML_SUFFIXES:
            fmt = "xml"
        elif suffix in YAML_SUFFIXES:
            fmt = "yaml"
        else:
            raise ValueError(
                f"Cannot infer language document format from suffix: {resolved}"
            )

    if fmt == "xml":
        return XMLDocumentProvider(resolved)
    if fmt == "yaml":
        return YAMLDocumentProvider(resolved)

    raise ValueError(f"Unsupported language document format: {document_format}")
