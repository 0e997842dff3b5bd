"""
Shared test fixtures and configuration for LegalRenamer tests.

This module provides reusable fixtures for testing the LegalRenamer application.
It centralizes common test dependencies to avoid duplication across test files.

Key Fixtures:
    - Sample metadata records in both naming conventions
    - A mock extractor that stands in for Gemini
    - Temporary document files on disk
    - An isolated environment without real API keys

Python Learning Notes:
    - conftest.py is automatically discovered by pytest
    - Fixtures defined here are available to all tests without import
    - autouse=True applies a fixture to every test without requesting it
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from legalrenamer.metadata.schema import DocumentMetadata, RenamingMode
from legalrenamer.naming.engine import FilenameGenerator
from legalrenamer.utils.config import RenamerConfig

CONFIG_ENV_VARS = (
    "GEMINI_API_KEY",
    "API_KEY",
    "GEMINI_MODEL",
    "LEGALRENAMER_MAX_FILE_SIZE_MB",
    "LEGALRENAMER_MODE",
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """
    Remove configuration variables so a developer's .env cannot leak into tests.

    Python Learning Notes:
        - monkeypatch.delenv(..., raising=False) ignores variables that are unset
        - Changes are reverted automatically after each test
    """
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def generator():
    """FilenameGenerator bound to the built-in dictionaries."""
    return FilenameGenerator()


@pytest.fixture
def legislative_metadata():
    """
    Metadata for a National Assembly resolution with a spaced-out number.

    Returns:
        DocumentMetadata: Record matching the reference end-to-end scenario.
    """
    return DocumentMetadata(
        date="20240115",
        doc_number="254 / 2025 / QH15",
        agency="Quốc hội",
        summary="phê duyệt chủ trương đầu tư dự án",
        doc_type="Nghị quyết",
        is_draft=False,
    )


@pytest.fixture
def circular_metadata():
    """Metadata for a ministry circular numbered 12/2024/TT-BXD."""
    return DocumentMetadata(
        date="20240115",
        doc_number="12/2024/TT-BXD",
        agency="Bộ Xây dựng",
        summary="Quy định chi tiết một số điều",
        doc_type="Thông tư",
    )


@pytest.fixture
def gemini_payload():
    """
    Raw camelCase payload as returned by Gemini.

    Returns:
        dict: JSON-compatible metadata using the API field names.
    """
    return {
        "isDraft": False,
        "date": "20240301",
        "docNumber": "15/2024/QĐ-UBND",
        "agency": "Ủy ban nhân dân tỉnh Quảng Ninh",
        "docType": "Quyết định",
        "summary": "Về việc phê duyệt quy hoạch chi tiết khu đô thị mới",
    }


@pytest.fixture
def renamer_config():
    """RenamerConfig with explicit values, independent of the environment."""
    return RenamerConfig(
        model_name="gemini-test-model",
        max_file_size_mb=20,
        default_mode=RenamingMode.STANDARD,
    )


@pytest.fixture
def mock_extractor(circular_metadata):
    """
    Mock extractor returning the circular metadata for every document.

    Python Learning Notes:
        - MagicMock records calls so tests can assert on extract() arguments
        - return_value sets what the mocked method returns
    """
    extractor = MagicMock()
    extractor.extract.return_value = circular_metadata
    return extractor


@pytest.fixture
def pdf_file(tmp_path) -> Path:
    """A small PDF-like file in a temporary directory."""
    path = tmp_path / "scan_001.PDF"
    path.write_bytes(b"%PDF-1.4\n% test document\n")
    return path
