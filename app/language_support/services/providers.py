"""
Application-scoped providers for the language catalog.

The explicit path is create_selection_service(); these accessors exist for
code that needs one shared instance per process.
"""

import threading
from functools import lru_cache
from typing import Optional

from language_support.catalog.factory import create_selection_service
from language_support.catalog.selection import SelectionService
from language_support.configuration import Settings
from language_support.logging import get_module_logger

logger = get_module_logger()

_selection_service: Optional[SelectionService] = None
_selection_service_lock = threading.Lock()


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


def get_selection_service() -> SelectionService:
    """Get the process-wide SelectionService.

    Thread-safe singleton. The first call loads the catalog configured in
    settings; concurrent first calls still load it exactly once. If loading
    fails the error propagates and no instance is stored, so a later call
    tries again.

    Returns:
        Shared SelectionService instance.

    Raises:
        LanguageSupportError: If the language document is invalid.
    """
    global _selection_service

    if _selection_service is None:
        with _selection_service_lock:
            # Double-check locking pattern
            if _selection_service is None:
                _selection_service = create_selection_service(
                    language_settings=get_settings().language
                )
                logger.debug("global_selection_service_initialized")

    return _selection_service


def reset_selection_service() -> None:
    """Drop the process-wide SelectionService (used by tests)."""
    global _selection_service

    with _selection_service_lock:
        _selection_service = None
