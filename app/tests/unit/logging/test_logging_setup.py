"""Unit tests for language_support.logging.setup module.

Tests cover:
- configure_logging function
- get_module_logger function
- Test logging suppression in test environment
"""

import logging
from unittest.mock import Mock, patch

import pytest

from language_support.configuration import Settings
from language_support.logging.setup import (
    _is_test_environment,
    configure_logging,
    get_module_logger,
)


@pytest.fixture
def mock_settings():
    """Mock Settings instance for testing."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = "INFO"
    settings.is_production = False
    return settings


@pytest.mark.unit
class TestIsTestEnvironment:
    """Test suite for _is_test_environment helper."""

    def test_detects_pytest_in_sys_modules(self):
        """Returns True when pytest is in sys.modules."""
        assert _is_test_environment() is True


@pytest.mark.unit
class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_returns_bound_logger(self, mock_settings):
        """configure_logging returns a logger with the usual methods."""
        result = configure_logging(settings=mock_settings)

        assert result is not None
        assert hasattr(result, "info")
        assert hasattr(result, "warning")
        assert hasattr(result, "error")
        assert hasattr(result, "bind")

    def test_suppresses_output_during_tests(self, mock_settings):
        """Root logger is raised above CRITICAL while pytest runs."""
        configure_logging(settings=mock_settings)
        assert logging.root.level > logging.CRITICAL

    def test_accepts_overrides(self):
        """Explicit overrides do not require a Settings instance."""
        result = configure_logging(log_level="DEBUG", is_production=True)
        assert hasattr(result, "info")

    def test_empty_log_level_falls_back_to_settings(self, mock_settings):
        """An empty log_level override uses LOG_LEVEL from Settings."""
        mock_settings.LOG_LEVEL = "WARNING"
        with patch(
            "language_support.logging.setup._is_test_environment", return_value=False
        ), patch(
            "language_support.logging.setup.Settings", return_value=mock_settings
        ) as settings_cls, patch(
            "language_support.logging.setup.structlog.configure"
        ), patch(
            "language_support.logging.setup.logging.basicConfig"
        ) as basic_config:
            configure_logging(log_level="", is_production=False)

        settings_cls.assert_called_once_with()
        assert basic_config.call_args.kwargs["level"] == logging.WARNING


@pytest.mark.unit
class TestGetModuleLogger:
    """Test suite for get_module_logger function."""

    def test_binds_calling_module(self):
        """The returned logger is bound to the calling module."""
        logger = get_module_logger()
        assert logger is not None
        assert hasattr(logger, "bind")
        logger.info("module_logger_test_event", value=1)

    def test_catalog_modules_have_loggers(self):
        """Catalog modules create their loggers at import time."""
        from language_support.catalog import loader, selection

        assert hasattr(loader.logger, "info")
        assert hasattr(selection.logger, "info")
