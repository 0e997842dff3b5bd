"""
Tests for main CLI entry point.

This module tests the main CLI command group, version display,
help text, and shell completion functionality.

Python Learning Notes:
    - Click's CliRunner provides testing for CLI applications
    - Result object contains output, exit code, and exception info
    - CLI testing doesn't require actual command execution
"""

import pytest
from click.testing import CliRunner

from legalrenamer import __version__
from legalrenamer.cli.main import main


@pytest.fixture
def cli_runner():
    """
    Create Click CLI test runner.

    Returns:
        CliRunner: Test runner for CLI commands.
    """
    return CliRunner()


class TestMainCLI:
    """Test main CLI entry point and global options."""

    def test_cli_shows_help_with_no_args(self, cli_runner):
        """Test CLI shows help when invoked without arguments."""
        result = cli_runner.invoke(main, [])

        assert result.exit_code == 0
        assert "LegalRenamer" in result.output
        assert "Commands:" in result.output

    def test_cli_shows_help_with_help_flag(self, cli_runner):
        result = cli_runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "Vietnamese legal documents" in result.output
        assert "Options:" in result.output

    def test_cli_shows_version(self, cli_runner):
        result = cli_runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output
        assert "legalrenamer" in result.output

    def test_cli_lists_subcommands(self, cli_runner):
        result = cli_runner.invoke(main, ["--help"])

        assert "rename" in result.output
        assert "name" in result.output

    def test_cli_invalid_command_shows_error(self, cli_runner):
        result = cli_runner.invoke(main, ["invalid-command"])

        assert result.exit_code != 0
        assert "Error" in result.output

    @pytest.mark.parametrize("subcommand", ["rename", "name"])
    def test_subcommand_help(self, cli_runner, subcommand):
        result = cli_runner.invoke(main, [subcommand, "--help"])

        assert result.exit_code == 0
        assert "--mode" in result.output


class TestShellCompletion:
    """Test the completion helper flags."""

    @pytest.mark.parametrize(
        "shell, snippet",
        [
            ("/bin/bash", "_LEGALRENAMER_COMPLETE=bash_source"),
            ("/usr/bin/zsh", "_LEGALRENAMER_COMPLETE=zsh_source"),
            ("/usr/bin/fish", "_LEGALRENAMER_COMPLETE=fish_source"),
        ],
    )
    def test_show_completion(self, cli_runner, monkeypatch, shell, snippet):
        monkeypatch.setenv("SHELL", shell)

        result = cli_runner.invoke(main, ["--show-completion"])

        assert result.exit_code == 0
        assert snippet in result.output

    def test_install_completion_names_rc_file(self, cli_runner, monkeypatch):
        monkeypatch.setenv("SHELL", "/bin/zsh")

        result = cli_runner.invoke(main, ["--install-completion"])

        assert result.exit_code == 0
        assert "~/.zshrc" in result.output

    def test_unknown_shell(self, cli_runner, monkeypatch):
        monkeypatch.setenv("SHELL", "/bin/tcsh")

        result = cli_runner.invoke(main, ["--show-completion"])

        assert result.exit_code == 1
        assert "Unknown shell: tcsh" in result.output
