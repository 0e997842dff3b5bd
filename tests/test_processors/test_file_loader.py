"""
Tests for loading document files before extraction.

Python Learning Notes:
    - pytest's tmp_path fixture gives each test its own empty directory
"""

import pytest

from legalrenamer.processors.file_loader import (
    SUPPORTED_MIME_TYPES,
    EmptyDocumentError,
    FileTooLargeError,
    LoadedDocument,
    UnsupportedFileTypeError,
    detect_mime_type,
    load_document,
)

ONE_MB = 1024 * 1024


class TestDetectMimeType:
    """Test suite for detect_mime_type()."""

    @pytest.mark.parametrize(
        "filename, expected",
        [
            ("scan.pdf", "application/pdf"),
            ("scan.PDF", "application/pdf"),
            ("photo.png", "image/png"),
            ("photo.jpg", "image/jpeg"),
            ("photo.JPEG", "image/jpeg"),
            ("photo.webp", "image/webp"),
        ],
    )
    def test_supported(self, filename, expected):
        assert detect_mime_type(filename) == expected

    @pytest.mark.parametrize("filename", ["letter.docx", "archive.zip", "README"])
    def test_unsupported(self, filename):
        with pytest.raises(UnsupportedFileTypeError):
            detect_mime_type(filename)

    def test_unsupported_is_value_error(self):
        with pytest.raises(ValueError, match=".pdf"):
            detect_mime_type("letter.docx")

    def test_table_keys_are_lowercase(self):
        assert all(ext == ext.lower() and ext.startswith(".") for ext in SUPPORTED_MIME_TYPES)


class TestLoadDocument:
    """Test suite for load_document()."""

    def test_loads_bytes_and_type(self, pdf_file):
        document = load_document(pdf_file)

        assert isinstance(document, LoadedDocument)
        assert document.data == pdf_file.read_bytes()
        assert document.mime_type == "application/pdf"
        assert document.path == pdf_file.resolve()
        assert document.path.is_absolute()

    def test_accepts_string_path(self, pdf_file):
        assert load_document(str(pdf_file)).path == pdf_file.resolve()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_document(tmp_path / "missing.pdf")

    def test_directory_is_not_a_file(self, tmp_path):
        folder = tmp_path / "folder.pdf"
        folder.mkdir()

        with pytest.raises(FileNotFoundError):
            load_document(folder)

    def test_unsupported_type(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("hello", encoding="utf-8")

        with pytest.raises(UnsupportedFileTypeError):
            load_document(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "blank.pdf"
        path.write_bytes(b"")

        with pytest.raises(EmptyDocumentError, match="blank.pdf is empty"):
            load_document(path)

    def test_too_large(self, tmp_path):
        path = tmp_path / "big.png"
        path.write_bytes(b"\0" * (ONE_MB + 1))

        with pytest.raises(FileTooLargeError, match="limit 1 MB"):
            load_document(path, max_size_mb=1)

    def test_exactly_at_limit(self, tmp_path):
        path = tmp_path / "edge.png"
        path.write_bytes(b"\0" * ONE_MB)

        document = load_document(path, max_size_mb=1)

        assert document.size_mb == 1.0
