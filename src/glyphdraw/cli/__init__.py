"""Command-line interface for glyphdraw.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Render a string as vector glyph outlines into a PDF
- Inspect the font metrics used for layout
- Structured JSON log file (auto-named when not given)
"""

from glyphdraw.cli.app import cli, main

__all__ = ["cli", "main"]
