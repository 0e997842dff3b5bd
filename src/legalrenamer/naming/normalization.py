"""Locale-aware text normalization for filename generation.

This module holds the small set of string transforms the naming engine builds on.
Every function accepts any ``str`` (including the empty string) and returns a
``str``; none of them raise.

The transforms are:
    - strip_diacritics: remove Vietnamese tone and vowel marks ("Hà Nội" -> "Ha Noi")
    - sanitize_for_filename: drop characters that are unsafe in filenames and
      collapse whitespace, leaving diacritics alone
    - collapse_whitespace: squeeze whitespace runs into single spaces
    - clean_text: the full pipeline used to finalize name fragments

Ordering matters in clean_text. Diacritics are stripped first, then unsafe
characters are removed, then whitespace is collapsed. Running the character filter
first would leave combining marks orphaned next to removed punctuation.

Python Learning Notes:
    - unicodedata.normalize("NFD", ...) splits "ế" into "e" plus combining marks
    - unicodedata.category() returns "Mn" for non-spacing (combining) marks
    - "đ" is a distinct letter, not "d" plus a mark, so it needs an explicit mapping
    - Compiled regular expressions at module level are built once per process
"""

import re
import unicodedata

# Superset of the characters rejected by Windows, macOS and Linux filesystems,
# plus punctuation that never belongs in a generated name.
UNSAFE_FILENAME_CHARS = re.compile(r"[!@#$%^*()+=\[\]{};':\"\\|,<>/?\x00-\x1f\x7f]")

WHITESPACE_RUN = re.compile(r"\s+")

_D_WITH_STROKE = str.maketrans({"đ": "d", "Đ": "D"})


def strip_diacritics(text: str) -> str:
    """Remove diacritical marks, including the Vietnamese "đ"/"Đ".

    Args:
        text (str): Any string. Empty strings are returned unchanged.

    Returns:
        str: The text with combining marks removed and "đ"/"Đ" mapped to "d"/"D".

    Example:
        >>> strip_diacritics("Bộ Xây dựng")
        'Bo Xay dung'
        >>> strip_diacritics("Đà Nẵng")
        'Da Nang'
    """
    if not text:
        return ""

    decomposed = unicodedata.normalize("NFD", text)
    without_marks = "".join(
        char for char in decomposed if unicodedata.category(char) != "Mn"
    )
    return without_marks.translate(_D_WITH_STROKE)


def collapse_whitespace(text: str) -> str:
    """Collapse runs of whitespace into single spaces and trim both ends."""
    if not text:
        return ""
    return WHITESPACE_RUN.sub(" ", text).strip()


def sanitize_for_filename(text: str) -> str:
    """Remove filename-unsafe characters and normalize whitespace.

    Characters such as ``* : " ? / \\ | < >`` are deleted outright (not replaced
    with a space), matching how names have always been produced. Diacritics are
    preserved; callers that also want ASCII output should use clean_text().

    Args:
        text (str): Raw fragment, e.g. an AI-extracted summary.

    Returns:
        str: The fragment without unsafe characters, whitespace collapsed and trimmed.

    Example:
        >>> sanitize_for_filename('Quy hoạch: "khu A"?')
        'Quy hoạch khu A'
    """
    if not text:
        return ""
    return collapse_whitespace(UNSAFE_FILENAME_CHARS.sub("", text))


def clean_text(text: str) -> str:
    """Apply the full sanitize pipeline: diacritics, unsafe characters, whitespace.

    Example:
        >>> clean_text("  Khu đô thị / Hà Nội? ")
        'Khu do thi Ha Noi'
    """
    return sanitize_for_filename(strip_diacritics(text))
