"""Application-scoped service providers."""

from language_support.services.providers import (
    get_selection_service,
    get_settings,
    reset_selection_service,
)

__all__ = ["get_settings", "get_selection_service", "reset_selection_service"]
