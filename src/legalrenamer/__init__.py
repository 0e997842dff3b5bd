"""
LegalRenamer: AI-assisted standardized filenames for Vietnamese legal documents.

LegalRenamer takes scanned or digital legal documents (PDF and image files), asks
Google Gemini to extract a handful of metadata fields from each one (issue date,
document number, issuing agency, document type and a short summary), and derives a
canonical compact filename from that metadata using Vietnamese abbreviation rules.

The LegalRenamer system provides:
    - A deterministic filename-generation engine (pure functions, no I/O)
    - Vietnamese-aware text normalization (diacritics, unsafe characters, whitespace)
    - Abbreviation dictionaries for agencies, summary phrases and document types
    - Two naming modes: "standard" and "legislative"
    - A Gemini-backed metadata extractor with classified failures
    - A command-line interface for renaming files in place

Package Structure:
    - naming/: Normalization library, abbreviation dictionaries and the filename engine
    - metadata/: Metadata schema, Gemini extractor and extraction error types
    - processors/: File loading and the rename workflow
    - utils/: Configuration and logging helpers
    - cli/: Click command-line entry points

Environment Requirements:
    - Python 3.11+ (specified in pyproject.toml)
    - GEMINI_API_KEY (for metadata extraction; not needed for the naming engine)

Python Learning Notes:
    - __version__: Special variable that defines the package version
    - Package initialization: This file makes the directory a Python package
    - Module imports: Submodules can be imported as legalrenamer.naming, etc.

Version History:
    - 0.1.0: Initial release with standard and legislative naming modes
"""

__version__ = "0.1.0"
