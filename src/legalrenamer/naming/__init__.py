"""Filename generation for Vietnamese legal documents.

This package is the pure core of LegalRenamer: given extracted metadata and a
naming mode it returns a canonical filename stem. Nothing in here performs I/O.

Components:
- normalization.py: diacritic stripping, filename sanitizing, whitespace collapsing
- dictionaries.py: read-only abbreviation tables and the AbbreviationDictionaries bundle
- engine.py: FilenameGenerator and the generate_filename() shortcut

Example Usage:
    from legalrenamer.metadata import DocumentMetadata, RenamingMode
    from legalrenamer.naming import generate_filename

    stem = generate_filename(
        DocumentMetadata(date="20240115", doc_number="12/2024/TT-BXD",
                         agency="Bộ Xây dựng", summary="Quy định chi tiết"),
        RenamingMode.STANDARD,
    )
    # "2024 12.TTBXD Quy dinh chi tiet"
"""

from .dictionaries import DEFAULT_DICTIONARIES, AbbreviationDictionaries
from .engine import FilenameGenerator, LegislativeNumber, generate_filename
from .normalization import (
    clean_text,
    collapse_whitespace,
    sanitize_for_filename,
    strip_diacritics,
)

__all__ = [
    "AbbreviationDictionaries",
    "DEFAULT_DICTIONARIES",
    "FilenameGenerator",
    "LegislativeNumber",
    "generate_filename",
    "clean_text",
    "collapse_whitespace",
    "sanitize_for_filename",
    "strip_diacritics",
]
