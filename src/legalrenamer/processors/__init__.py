"""
Document processing for LegalRenamer.

Components:
    - file_loader: read PDF/image files and detect their MIME type
    - renamer: rename files on disk and run the load -> extract -> rename workflow
"""

from .file_loader import (
    SUPPORTED_MIME_TYPES,
    EmptyDocumentError,
    FileTooLargeError,
    LoadedDocument,
    UnsupportedFileTypeError,
    detect_mime_type,
    load_document,
)
from .renamer import DocumentRenamer, RenameResult, RenameStatus, rename_file

__all__ = [
    "SUPPORTED_MIME_TYPES",
    "EmptyDocumentError",
    "FileTooLargeError",
    "LoadedDocument",
    "UnsupportedFileTypeError",
    "detect_mime_type",
    "load_document",
    "DocumentRenamer",
    "RenameResult",
    "RenameStatus",
    "rename_file",
]
