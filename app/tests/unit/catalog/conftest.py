"""Feature-level fixtures for language catalog tests."""

import pytest
import yaml

from tests.factories.catalog import document_to_xml, make_document


@pytest.fixture
def sample_document():
    """Parsed document with English and French, default English."""
    return make_document()


@pytest.fixture
def xml_document_file(tmp_path, sample_document):
    """Write sample_document as language.xml and return its path."""
    path = tmp_path / "language.xml"
    path.write_text(document_to_xml(sample_document), encoding="utf-8")
    return path


@pytest.fixture
def yaml_document_file(tmp_path, sample_document):
    """Write sample_document as language.yml and return its path."""
    path = tmp_path / "language.yml"
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(sample_document, f, allow_unicode=True)
    return path
