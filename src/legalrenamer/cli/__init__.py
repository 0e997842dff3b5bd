"""
Command-line interface for LegalRenamer.

This module provides CLI commands for:
- Renaming documents with AI-extracted metadata
- Generating a filename from metadata offline

Usage:
    legalrenamer rename FILES...   # Analyze and rename files
    legalrenamer name --json FILE  # Print the name for known metadata
"""

from .main import main
from .name import name
from .rename import rename

__all__ = ["main", "rename", "name"]
