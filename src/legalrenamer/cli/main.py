"""
Main CLI entry point for LegalRenamer.

This module provides the primary command-line interface using Click.
All commands are organized into subcommands for different operations.
"""

import os
import sys

import click

from .. import __version__
from .name import name
from .rename import rename

COMPLETION_SNIPPETS = {
    "bash": 'eval "$(_LEGALRENAMER_COMPLETE=bash_source legalrenamer)"',
    "zsh": 'eval "$(_LEGALRENAMER_COMPLETE=zsh_source legalrenamer)"',
    "fish": "_LEGALRENAMER_COMPLETE=fish_source legalrenamer | source",
}

COMPLETION_RC_FILES = {
    "bash": "~/.bashrc or ~/.bash_profile",
    "zsh": "~/.zshrc",
    "fish": "~/.config/fish/config.fish",
}


def _current_shell() -> str:
    return os.path.basename(os.environ.get("SHELL", ""))


def shell_complete_install():
    """Print instructions for installing shell completion for the current shell."""
    shell = _current_shell()

    if shell not in COMPLETION_SNIPPETS:
        click.echo(f"Unknown shell: {shell}. Completion supported for bash, zsh, and fish.")
        sys.exit(1)

    click.echo(f"Installing completion for {shell}...")
    click.echo("\nAdd this to your shell's RC file:\n")
    click.echo(COMPLETION_SNIPPETS[shell])
    click.echo(f"\nFor {shell}, add to {COMPLETION_RC_FILES[shell]}")
    click.echo("\nThen restart your shell or run: source <your-rc-file>")


def shell_complete_show():
    """Show shell completion code for the current shell."""
    shell = _current_shell()

    if shell not in COMPLETION_SNIPPETS:
        click.echo(f"Unknown shell: {shell}. Completion supported for bash, zsh, and fish.")
        sys.exit(1)

    click.echo(COMPLETION_SNIPPETS[shell])


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="legalrenamer")
@click.option("--install-completion", is_flag=True, help="Install shell completion")
@click.option("--show-completion", is_flag=True, help="Show shell completion code")
@click.pass_context
def main(ctx, install_completion, show_completion):
    """
    LegalRenamer - standardized filenames for Vietnamese legal documents.

    Reads PDF and image files with Google Gemini, extracts the issue date,
    document number, issuing agency, type and summary, and renames each file
    using Vietnamese abbreviation rules.

    \b
    Shell Completion:
        legalrenamer --install-completion    # Install completion
        legalrenamer --show-completion       # Show completion code
    """
    if install_completion:
        shell_complete_install()
        ctx.exit()
    if show_completion:
        shell_complete_show()
        ctx.exit()
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Register subcommands
main.add_command(rename)
main.add_command(name)


if __name__ == "__main__":
    main()
