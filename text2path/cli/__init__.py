"""Command-line interface for text2path."""

from text2path.cli.main import cli

__all__ = ["cli"]
