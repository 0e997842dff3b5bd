"""
Tests for the text normalization helpers.

These helpers are the last step before any fragment lands in a filename, so the
tests focus on two properties: Vietnamese text becomes plain ASCII, and nothing a
filesystem rejects survives.

Python Learning Notes:
    - pytest.mark.parametrize runs one test body against many inputs
    - unicodedata.normalize lets us build NFD input to check decomposed text
"""

import unicodedata

import pytest

from legalrenamer.naming.normalization import (
    clean_text,
    collapse_whitespace,
    sanitize_for_filename,
    strip_diacritics,
)


class TestStripDiacritics:
    """Test suite for strip_diacritics()."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Bộ Xây dựng", "Bo Xay dung"),
            ("Đà Nẵng", "Da Nang"),
            ("Ủy ban nhân dân", "Uy ban nhan dan"),
            ("quyền sử dụng đất", "quyen su dung dat"),
            ("ĐỒNG NAI", "DONG NAI"),
        ],
    )
    def test_vietnamese_text(self, text, expected):
        """Tone marks, vowel marks and the stroked d are all removed."""
        assert strip_diacritics(text) == expected

    def test_ascii_unchanged(self):
        """Plain ASCII passes through untouched."""
        assert strip_diacritics("TT-BXD 2024") == "TT-BXD 2024"

    def test_empty_string(self):
        """Empty input returns an empty string."""
        assert strip_diacritics("") == ""

    def test_nfd_input_matches_nfc_input(self):
        """
        Decomposed and precomposed forms give the same result.

        Python Learning Notes:
            - Text copied from PDFs is often NFD, so both forms must work
        """
        text = "Thành phố Hồ Chí Minh"
        nfd = unicodedata.normalize("NFD", text)

        assert strip_diacritics(nfd) == strip_diacritics(text) == "Thanh pho Ho Chi Minh"


class TestCollapseWhitespace:
    """Test suite for collapse_whitespace()."""

    def test_collapses_mixed_whitespace(self):
        assert collapse_whitespace("  a \t b\n\n c  ") == "a b c"

    def test_empty_and_blank(self):
        assert collapse_whitespace("") == ""
        assert collapse_whitespace("   \n") == ""


class TestSanitizeForFilename:
    """Test suite for sanitize_for_filename()."""

    @pytest.mark.parametrize("char", list('*:"?/\\|<>'))
    def test_removes_reserved_characters(self, char):
        """Every character reserved by common filesystems is deleted."""
        assert sanitize_for_filename(f"khu{char}A") == "khuA"

    def test_removes_control_characters(self):
        assert sanitize_for_filename("a\x00b\x1fc") == "abc"

    def test_keeps_diacritics(self):
        """Sanitizing alone does not strip Vietnamese marks."""
        assert sanitize_for_filename('Quy hoạch: "khu A"?') == "Quy hoạch khu A"

    def test_keeps_dots_dashes_and_brackets_used_in_names(self):
        """Characters the templates rely on are not treated as unsafe."""
        assert sanitize_for_filename("12.TTBXD - _NQ") == "12.TTBXD - _NQ"

    def test_collapses_space_left_by_removed_characters(self):
        assert sanitize_for_filename("a / b") == "a b"

    def test_empty_string(self):
        assert sanitize_for_filename("") == ""


class TestCleanText:
    """Test suite for clean_text(), the full pipeline."""

    def test_full_pipeline(self):
        assert clean_text("  Khu đô thị / Hà Nội? ") == "Khu do thi Ha Noi"

    def test_removed_separator_joins_words(self):
        """Unsafe characters are deleted, not replaced with spaces."""
        assert clean_text("Hà/Nội") == "HaNoi"

    def test_date_with_slashes(self):
        assert clean_text("2024/01/15") == "20240115"

    def test_output_is_ascii(self):
        result = clean_text("Nghị quyết về điều chỉnh quy hoạch đô thị Đà Lạt")

        assert result.isascii()
        assert result == "Nghi quyet ve dieu chinh quy hoach do thi Da Lat"

    def test_empty_string(self):
        assert clean_text("") == ""
