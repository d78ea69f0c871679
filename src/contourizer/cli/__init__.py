"""Command-line interface for contourizer.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Threshold, blur and simplification options
- JSON or SVG output
- Verbose/quiet output modes
- Dry-run mode for inspecting shape counts
"""

from contourizer.cli.app import cli

__all__ = ["cli"]
