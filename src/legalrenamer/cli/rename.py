"""
Document renaming CLI command.

Analyzes PDF and image files with Gemini and renames them in place.
"""

import sys
from pathlib import Path

import click

from ..metadata.exceptions import AuthenticationError, QuotaExhaustedError
from ..metadata.schema import RenamingMode
from ..processors.renamer import RenameResult, RenameStatus

MODE_CHOICES = [mode.value for mode in RenamingMode]


def _report(result: RenameResult) -> None:
    """Print a one-line outcome for a processed file."""
    old_name = result.source.name

    if result.status is RenameStatus.RENAMED:
        click.echo(f"✓ {old_name} → {result.new_name}")
    elif result.status is RenameStatus.PROPOSED:
        click.echo(f"→ {old_name} → {result.new_name} (dry run)")
    elif result.status is RenameStatus.UNCHANGED:
        click.echo(f"= {old_name} already has the standard name")
    elif result.status is RenameStatus.SKIPPED:
        click.echo(f"- {old_name} skipped: {result.error}")
    else:
        click.echo(f"✗ {old_name}: {result.error}", err=True)


@click.command()
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(path_type=Path),
)
@click.option(
    "--mode",
    type=click.Choice(MODE_CHOICES),
    default=None,
    help="Naming mode: 'standard' or 'legislative' for laws/decrees/circulars "
    "(default: LEGALRENAMER_MODE or standard)",
)
@click.option(
    "--api-key",
    default=None,
    help="Gemini API key (default: GEMINI_API_KEY from the environment or .env)",
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Show the new names without renaming any files",
)
@click.option(
    "--verbose",
    is_flag=True,
    help="Enable verbose logging",
)
def rename(files, mode, api_key, dry_run, verbose):
    """
    Rename legal documents using AI-extracted metadata.

    Each file is sent to Gemini, the returned metadata is turned into a
    standardized name, and the file is renamed in its own directory. Files are
    processed one at a time. An existing file is never overwritten.

    Example:
        legalrenamer rename "scan 001.pdf" "scan 002.jpg"
        legalrenamer rename --mode legislative --dry-run ~/Downloads/*.pdf
    """
    # Import here to avoid loading the Gemini client unless needed
    from ..metadata.gemini_extractor import GeminiMetadataExtractor
    from ..processors.renamer import DocumentRenamer
    from ..utils import get_logger, setup_logging
    from ..utils.config import RenamerConfig

    # Setup logging
    setup_logging(verbose=verbose)

    try:
        config = RenamerConfig()
        extractor = GeminiMetadataExtractor(api_key=api_key, config=config)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    renamer = DocumentRenamer(
        extractor,
        mode=RenamingMode(mode) if mode else None,
        config=config,
        dry_run=dry_run,
    )

    click.echo(
        f"Processing {len(files)} file(s) in {renamer.mode.value} mode"
        + (" (dry run)" if dry_run else "")
    )

    counts = {status: 0 for status in RenameStatus}
    for path in files:
        try:
            result = renamer.process(path)
        except (AuthenticationError, QuotaExhaustedError) as e:
            click.echo(f"✗ {Path(path).name}: {e}", err=True)
            click.echo("Aborting remaining files", err=True)
            sys.exit(1)
        except KeyboardInterrupt:
            click.echo("\n\nRenaming interrupted by user")
            sys.exit(0)
        except Exception as e:
            get_logger(__name__).error("Unexpected error processing %s", path, exc_info=True)
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

        counts[result.status] += 1
        _report(result)

    summary = ", ".join(
        f"{count} {status.value}" for status, count in counts.items() if count
    )
    click.echo(f"\nDone: {summary}")

    if counts[RenameStatus.FAILED] or counts[RenameStatus.CONFLICT]:
        sys.exit(1)
