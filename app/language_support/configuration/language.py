"""Language document settings."""

from typing import Optional

from pydantic import Field, field_validator

from language_support.configuration.base import CatalogSettingsBase

DOCUMENT_FORMATS = ("auto", "xml", "yaml")


class LanguageSettings(CatalogSettingsBase):
    """Language catalog source configuration.

    Environment Variables:
        LANGUAGE_DOCUMENT_PATH: Path to the language document. Uses the
            bundled resources/language.xml when unset.
        LANGUAGE_DOCUMENT_FORMAT: 'auto' (by file suffix), 'xml' or 'yaml'
        LANGUAGE_STRICT_CONSISTENCY: Reject item lists whose language is not
            declared in LanguageSupport (default: True)

    Example:
        ```python
        from language_support.services import get_settings

        settings = get_settings()

        if settings.language.document_path:
            path = settings.language.document_path
        ```
    """

    document_path: Optional[str] = Field(
        default=None,
        alias="LANGUAGE_DOCUMENT_PATH",
        description="Path to the language document (bundled asset if unset)",
    )
    document_format: str = Field(
        default="auto",
        alias="LANGUAGE_DOCUMENT_FORMAT",
        description="Document format: auto, xml or yaml",
    )
    strict_consistency: bool = Field(
        default=True,
        alias="LANGUAGE_STRICT_CONSISTENCY",
        description="Reject item lists with no matching declared language",
    )

    @field_validator("document_format")
    @classmethod
    def validate_document_format(cls, value: str) -> str:
        """Normalize and validate the document format."""
        normalized = value.strip().lower()
        if normalized not in DOCUMENT_FORMATS:
            raise ValueError(
                f"document_format must be one of {', '.join(DOCUMENT_FORMATS)}: {value}"
            )
        return normalized
