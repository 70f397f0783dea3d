"""text2path: Convert text strings to vector path outlines.

This library provides:
- Unicode BiDi run ordering for mixed LTR/RTL text (Arabic, Hebrew, ...)
- HarfBuzz text shaping
- Glyph outline extraction and placement via fontTools pens
- Quadratic-to-cubic curve elevation for cubic-only consumers
- SVG path-data output

Example:
    >>> from text2path import FontTable, TextRequest, text_to_path
    >>> fonts = FontTable()
    >>> fonts.load("sans", "DejaVuSans.ttf")
    >>> path = text_to_path(TextRequest("Hello", "sans", 24, x=10, y=50), fonts)
    >>> path.to_svg()
"""

from text2path.api import (
    Text2PathConverter,
    TextRequest,
    draw_text,
    text_to_path,
    text_to_path_data,
)
from text2path.config import Config
from text2path.exceptions import (
    ConfigError,
    FontLoadError,
    FontTableFrozenError,
    PathFormatError,
    Text2PathError,
)
from text2path.fonts import FontFace, FontTable
from text2path.path import Close, CubicTo, LineTo, MoveTo, Path, QuadTo
from text2path.pens import CubicPen, PathPen, elevate_quadratic

__version__ = "0.1.0"

__all__ = [
    # Main API
    "Text2PathConverter",
    "TextRequest",
    "text_to_path",
    "text_to_path_data",
    "draw_text",
    "Config",
    # Paths and pens
    "Path",
    "MoveTo",
    "LineTo",
    "QuadTo",
    "CubicTo",
    "Close",
    "PathPen",
    "CubicPen",
    "elevate_quadratic",
    # Font handling
    "FontFace",
    "FontTable",
    # Exceptions
    "Text2PathError",
    "PathFormatError",
    "FontLoadError",
    "FontTableFrozenError",
    "ConfigError",
    # Metadata
    "__version__",
]
