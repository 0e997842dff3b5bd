"""
Offline filename generation CLI command.

Prints the standardized filename for metadata given on the command line or in a
JSON file, without calling Gemini or touching any files.
"""

import json
import sys

import click
from pydantic import ValidationError

from ..metadata.schema import DocumentMetadata, RenamingMode
from ..naming.engine import generate_filename

MODE_CHOICES = [mode.value for mode in RenamingMode]


@click.command()
@click.option("--date", default=None, help="Issue date (YYYYMMDD)")
@click.option("--number", "doc_number", default=None, help="Document number, e.g. 12/2024/TT-BXD")
@click.option("--agency", default=None, help="Issuing agency, e.g. 'Bộ Xây dựng'")
@click.option("--summary", default=None, help="Document summary (trích yếu)")
@click.option("--doc-type", default=None, help="Document type, e.g. 'Nghị định'")
@click.option("--draft", is_flag=True, help="Mark the document as a draft")
@click.option(
    "--json",
    "json_file",
    type=click.File("r", encoding="utf-8"),
    default=None,
    help="Read metadata from a JSON file ('-' for stdin); options above override its fields",
)
@click.option(
    "--mode",
    type=click.Choice(MODE_CHOICES),
    default=RenamingMode.STANDARD.value,
    show_default=True,
    help="Naming mode",
)
def name(date, doc_number, agency, summary, doc_type, draft, json_file, mode):
    """
    Print the standardized filename for the given metadata.

    Accepts the same fields Gemini extracts. JSON input may use either
    camelCase (docNumber, isDraft) or snake_case (doc_number, is_draft) keys.

    Example:
        legalrenamer name --date 20240115 --number "12/2024/TT-BXD" \\
            --agency "Bộ Xây dựng" --summary "Quy định chi tiết"
        legalrenamer name --json metadata.json --mode legislative
    """
    payload = {}
    if json_file is not None:
        try:
            payload = json.load(json_file)
        except json.JSONDecodeError as e:
            click.echo(f"Error: invalid JSON: {e}", err=True)
            sys.exit(1)
        if not isinstance(payload, dict):
            click.echo("Error: JSON metadata must be an object", err=True)
            sys.exit(1)

    overrides = {
        "date": date,
        "doc_number": doc_number,
        "agency": agency,
        "summary": summary,
        "doc_type": doc_type,
    }
    fields = dict(payload)
    for key, value in overrides.items():
        if value is not None:
            fields.pop(DocumentMetadata.model_fields[key].alias or key, None)
            fields[key] = value
    if draft:
        fields.pop("isDraft", None)
        fields["is_draft"] = True

    try:
        metadata = DocumentMetadata.model_validate(fields)
    except ValidationError as e:
        click.echo(f"Error: invalid metadata: {e}", err=True)
        sys.exit(1)

    click.echo(generate_filename(metadata, RenamingMode(mode)))
