"""Configuration module - public API.

Exports:
    Settings: Main settings class
    LanguageSettings: Language document settings section

Example:
    ```python
    from language_support.services import get_settings

    settings = get_settings()
    document_path = settings.language.document_path
    ```
"""

from language_support.configuration.language import DOCUMENT_FORMATS, LanguageSettings
from language_support.configuration.settings import Settings

__all__ = ["Settings", "LanguageSettings", "DOCUMENT_FORMATS"]
