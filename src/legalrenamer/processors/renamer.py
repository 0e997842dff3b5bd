"""
Renaming documents on disk from extracted metadata.

This module connects the pieces: it loads a file, asks the extractor for metadata,
runs the filename engine, and renames the file in place. Two layers are exposed:

    - rename_file(): the low-level filesystem step, (path, new stem) -> RenameResult
    - DocumentRenamer: the per-file workflow, load -> extract -> generate -> rename

Outcomes are reported as RenameResult values rather than exceptions, so a batch
can keep going past one bad file. The exceptions are AuthenticationError and
QuotaExhaustedError, which propagate: every remaining file would fail the same
way, so the caller should stop.

Python Learning Notes:
    - Path.with_name() swaps the final path component, keeping the directory
    - Path.rename() is atomic on the same filesystem but overwrites silently on
      POSIX, which is why the destination is checked first
    - dataclasses.replace() copies a dataclass instance with some fields changed
"""

import os
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from ..metadata.exceptions import (
    AuthenticationError,
    ExtractionError,
    QuotaExhaustedError,
)
from ..metadata.schema import DocumentMetadata, RenamingMode
from ..naming.engine import FilenameGenerator
from ..utils import get_logger
from ..utils.config import RenamerConfig
from .file_loader import (
    EmptyDocumentError,
    FileTooLargeError,
    UnsupportedFileTypeError,
    load_document,
)

logger = get_logger(__name__)


class RenameStatus(str, Enum):
    """Outcome of processing one file."""

    RENAMED = "renamed"
    PROPOSED = "proposed"  # dry run: name computed, file untouched
    UNCHANGED = "unchanged"  # file already has the generated name
    CONFLICT = "conflict"  # another file already has the generated name
    SKIPPED = "skipped"  # unsupported type, empty, or over the size limit
    FAILED = "failed"


@dataclass(frozen=True)
class RenameResult:
    """
    Result of renaming (or trying to rename) a single document.

    Attributes:
        source: Absolute path of the original file.
        status: What happened.
        new_name: Generated filename including extension, when one was produced.
        target: Absolute destination path, when one was computed.
        metadata: Extracted metadata, when extraction succeeded.
        error: Human-readable reason for SKIPPED, CONFLICT and FAILED results.
    """

    source: Path
    status: RenameStatus
    new_name: Optional[str] = None
    target: Optional[Path] = None
    metadata: Optional[DocumentMetadata] = None
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.status in (
            RenameStatus.RENAMED,
            RenameStatus.PROPOSED,
            RenameStatus.UNCHANGED,
        )


def rename_file(
    path: Union[str, Path], new_stem: str, dry_run: bool = False
) -> RenameResult:
    """Rename a file to ``new_stem`` plus its original (lowercased) extension.

    The file stays in its directory. An existing file at the destination is never
    overwritten.

    Args:
        path: File to rename.
        new_stem: Filename without extension, as returned by FilenameGenerator.
        dry_run: If True, compute the destination but leave the file alone.

    Returns:
        RenameResult: RENAMED, PROPOSED, UNCHANGED, CONFLICT, or FAILED when the
            operating system refuses the rename.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If ``new_stem`` is empty.

    Example:
        >>> rename_file("scan_001.PDF", "2024 12.TTBXD Quy dinh chi tiet")
        RenameResult(..., status=<RenameStatus.RENAMED: 'renamed'>,
                     new_name='2024 12.TTBXD Quy dinh chi tiet.pdf', ...)
    """
    if not new_stem or not new_stem.strip():
        raise ValueError("New filename must not be empty")

    source = Path(path).expanduser().resolve()
    if not source.is_file():
        raise FileNotFoundError(f"File does not exist: {source}")

    new_name = f"{new_stem}{source.suffix.lower()}"
    target = source.with_name(new_name)

    if target == source:
        return RenameResult(source, RenameStatus.UNCHANGED, new_name, target)

    # On case-insensitive filesystems a case-only change "exists" as the same file.
    if target.exists() and not os.path.samefile(source, target):
        return RenameResult(
            source,
            RenameStatus.CONFLICT,
            new_name,
            target,
            error=f"Destination already exists: {new_name}",
        )

    if dry_run:
        return RenameResult(source, RenameStatus.PROPOSED, new_name, target)

    try:
        source.rename(target)
    except OSError as e:
        logger.error("Failed to rename %s -> %s: %s", source.name, new_name, e)
        return RenameResult(source, RenameStatus.FAILED, new_name, target, error=str(e))

    logger.info("Renamed %s -> %s", source.name, new_name)
    return RenameResult(source, RenameStatus.RENAMED, new_name, target)


class DocumentRenamer:
    """
    Analyze documents with an extractor and rename them with the filename engine.

    Python Learning Notes:
        - The extractor is injected, so tests can pass a Mock with an extract()
          method instead of a real Gemini client
        - Each process() call is independent; the instance holds no per-file state

    Attributes:
        extractor: Object with ``extract(data: bytes, mime_type: str) -> DocumentMetadata``
            (normally a GeminiMetadataExtractor).
        mode (RenamingMode): Naming mode applied to every file.
        config (RenamerConfig): Size limit and defaults.
        generator (FilenameGenerator): Filename engine instance.
        dry_run (bool): Compute names without renaming.

    Example Usage:
        renamer = DocumentRenamer(GeminiMetadataExtractor(), RenamingMode.LEGISLATIVE)
        result = renamer.process("scan_001.pdf")
        if result.succeeded:
            print(result.new_name)
    """

    def __init__(
        self,
        extractor,
        mode: Optional[RenamingMode] = None,
        config: Optional[RenamerConfig] = None,
        generator: Optional[FilenameGenerator] = None,
        dry_run: bool = False,
    ):
        self.extractor = extractor
        self.config = config or RenamerConfig()
        self.mode = RenamingMode(mode) if mode is not None else self.config.default_mode
        self.generator = generator or FilenameGenerator()
        self.dry_run = dry_run

    def process(self, path: Union[str, Path]) -> RenameResult:
        """Load, analyze and rename one document.

        Args:
            path: Document to process.

        Returns:
            RenameResult: The outcome. Missing files and ordinary extraction errors
                become FAILED, and unsupported, empty or oversized files become SKIPPED.

        Raises:
            AuthenticationError: If the API key is rejected.
            QuotaExhaustedError: If the API quota is used up.
        """
        source = Path(path).expanduser().resolve()
        logger.info("Processing %s", source.name)

        try:
            document = load_document(source, self.config.max_file_size_mb)
        except (UnsupportedFileTypeError, EmptyDocumentError, FileTooLargeError) as e:
            logger.warning("Skipping %s: %s", source.name, e)
            return RenameResult(source, RenameStatus.SKIPPED, error=str(e))
        except FileNotFoundError as e:
            logger.error("%s", e)
            return RenameResult(source, RenameStatus.FAILED, error=str(e))

        try:
            metadata = self.extractor.extract(document.data, document.mime_type)
        except (AuthenticationError, QuotaExhaustedError):
            raise
        except ExtractionError as e:
            logger.error("Extraction failed for %s: %s", source.name, e)
            return RenameResult(source, RenameStatus.FAILED, error=str(e))

        stem = self.generator.generate(metadata, self.mode)
        logger.debug("Generated name for %s: %s", source.name, stem)

        result = rename_file(document.path, stem, dry_run=self.dry_run)
        return replace(result, metadata=metadata)
