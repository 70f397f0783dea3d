"""CLI commands for text2path."""

from text2path.cli.commands.convert import convert
from text2path.cli.commands.fonts import fonts
from text2path.cli.commands.runs import runs

__all__ = ["convert", "fonts", "runs"]
