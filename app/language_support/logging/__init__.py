"""Structured logging for the language catalog, built on structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module
"""

from language_support.logging.setup import configure_logging, get_module_logger

__all__ = ["configure_logging", "get_module_logger"]
