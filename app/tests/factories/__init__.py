"""Test data factories for deterministic test data generation."""

from tests.factories.catalog import (
    make_catalog,
    make_document,
    make_item,
    make_language,
    make_selection_service,
)

__all__ = [
    "make_catalog",
    "make_document",
    "make_item",
    "make_language",
    "make_selection_service",
]
