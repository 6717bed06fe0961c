"""Shared fixtures for the language support test suite."""

import pytest

from language_support.services import get_settings, reset_selection_service


@pytest.fixture(autouse=True)
def reset_application_singletons():
    """Give every test a fresh settings cache and selection service."""
    get_settings.cache_clear()
    reset_selection_service()
    yield
    get_settings.cache_clear()
    reset_selection_service()


@pytest.fixture
def clean_language_env(monkeypatch):
    """Remove LANGUAGE_* variables so settings fall back to defaults."""
    for name in (
        "LANGUAGE_DOCUMENT_PATH",
        "LANGUAGE_DOCUMENT_FORMAT",
        "LANGUAGE_STRICT_CONSISTENCY",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
