"""
Loading document files for AI analysis.

Gemini accepts PDFs and common image formats inline. This module reads a file from
disk, checks that its type is supported and that it is under the upload size
limit, and returns its bytes together with the MIME type to send.

Python Learning Notes:
    - pathlib.Path.suffix gives the extension including the dot (".pdf")
    - Path.stat().st_size is the file size in bytes
    - Custom exceptions subclass ValueError so generic handlers still catch them
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from ..utils.config import DEFAULT_MAX_FILE_SIZE_MB

SUPPORTED_MIME_TYPES = {
    ".pdf": "application/pdf",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".webp": "image/webp",
}


class UnsupportedFileTypeError(ValueError):
    """The file extension is not one Gemini can analyze."""


class EmptyDocumentError(ValueError):
    """The file has no content to analyze."""


class FileTooLargeError(ValueError):
    """The file exceeds the upload size limit."""


@dataclass(frozen=True)
class LoadedDocument:
    """A document read from disk and ready to send for extraction."""

    path: Path
    data: bytes
    mime_type: str

    @property
    def size_mb(self) -> float:
        return len(self.data) / (1024 * 1024)


def detect_mime_type(path: Union[str, Path]) -> str:
    """Return the MIME type for a supported document path.

    Raises:
        UnsupportedFileTypeError: If the extension is not supported.

    Example:
        >>> detect_mime_type("Nghi dinh.PDF")
        'application/pdf'
    """
    suffix = Path(path).suffix.lower()
    try:
        return SUPPORTED_MIME_TYPES[suffix]
    except KeyError:
        supported = ", ".join(sorted(SUPPORTED_MIME_TYPES))
        raise UnsupportedFileTypeError(
            f"Unsupported file type '{suffix or '(none)'}'; expected one of {supported}"
        ) from None


def load_document(
    path: Union[str, Path], max_size_mb: int = DEFAULT_MAX_FILE_SIZE_MB
) -> LoadedDocument:
    """Read a document from disk for extraction.

    The type and size checks run before the file is read, so oversized scans are
    rejected without loading them into memory.

    Args:
        path: Path to a PDF or image file.
        max_size_mb: Upload limit in megabytes (default 20).

    Returns:
        LoadedDocument: Absolute path, raw bytes and MIME type.

    Raises:
        FileNotFoundError: If the path does not exist or is not a file.
        UnsupportedFileTypeError: If the extension is not supported.
        EmptyDocumentError: If the file is empty.
        FileTooLargeError: If the file is larger than ``max_size_mb``.
    """
    absolute_path = Path(path).expanduser().resolve()

    if not absolute_path.is_file():
        raise FileNotFoundError(f"File does not exist: {absolute_path}")

    mime_type = detect_mime_type(absolute_path)

    size = absolute_path.stat().st_size
    if size == 0:
        raise EmptyDocumentError(f"{absolute_path.name} is empty")
    if size > max_size_mb * 1024 * 1024:
        raise FileTooLargeError(
            f"{absolute_path.name} is {size / (1024 * 1024):.2f} MB "
            f"(limit {max_size_mb} MB)"
        )

    return LoadedDocument(
        path=absolute_path,
        data=absolute_path.read_bytes(),
        mime_type=mime_type,
    )
