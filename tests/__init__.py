"""
Test suite for LegalRenamer.

Tests are organized by module to mirror the source code structure.

Test Organization:
    - test_naming/: Normalization, abbreviation dictionaries and the filename engine
    - test_metadata/: Metadata schema and the Gemini extractor (mocked)
    - test_processors/: File loading and renaming on disk
    - test_cli/: Click commands via CliRunner
    - test_utils/: Configuration and logging helpers

Python Learning Notes:
    - __init__.py makes this directory a Python package
    - Tests are discovered automatically by pytest
    - Test files should start with test_ prefix
"""
