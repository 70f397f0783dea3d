"""Exception hierarchy for text2path.

Absence (unknown font key) is reported as ``None`` by the conversion API,
never as an exception. Everything raised by the library derives from
:class:`Text2PathError`.
"""

from __future__ import annotations


class Text2PathError(Exception):
    """Base class for all text2path errors."""


class PathFormatError(Text2PathError):
    """A path could not be formatted to, or parsed from, path data."""


class FontLoadError(Text2PathError):
    """A font file could not be read or parsed."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load font {path}: {reason}")


class FontTableFrozenError(Text2PathError):
    """A write was attempted on a frozen font table."""


class ConfigError(Text2PathError):
    """Configuration file or value is invalid."""
