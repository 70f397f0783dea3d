"""Conversion API.

Example:
    >>> from text2path import FontTable, TextRequest, Text2PathConverter
    >>> fonts = FontTable()
    >>> fonts.load("arabic", "fonts/NotoNaskhArabic-Regular.ttf")
    >>> converter = Text2PathConverter(fonts.freeze())
    >>> d = converter.to_path_data(TextRequest("مرحبا Hello", "arabic", 64, x=20, y=100))
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from text2path.compositor import GlyphCompositor
from text2path.config import Config
from text2path.log import setup_logging
from text2path.path import Path
from text2path.pens import CubicPen
from text2path.shaping.bidi import get_visual_runs
from text2path.svg.pathdata import format_path_data

if TYPE_CHECKING:
    from fontTools.pens.basePen import AbstractPen

    from text2path.fonts.face import FontFace

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextRequest:
    """What to draw, where, and how big.

    Attributes:
        text: The string to convert. Only its first paragraph is used.
        font: Key of the font in the font table.
        font_size: Size in document units per em.
        x: Origin X (left end of the baseline).
        y: Origin Y (baseline).
        letter_spacing: Extra advance added after each directional run.
        y_up: Keep the font's upward Y axis (print space). The default
            mirrors Y for screen-space coordinates.
    """

    text: str
    font: str
    font_size: float
    x: float = 0.0
    y: float = 0.0
    letter_spacing: float = 0.0
    y_up: bool = False


def text_to_path(
    request: TextRequest,
    fonts: Mapping[str, FontFace],
    config: Config | None = None,
) -> Path | None:
    """Convert ``request`` into a path in document space.

    Returns None when ``request.font`` is not in ``fonts``. Empty text gives
    an empty path.
    """
    config = config or Config()
    face = fonts.get(request.font)
    if face is None:
        logger.warning("Unknown font key: %r", request.font)
        return None

    runs = get_visual_runs(request.text)
    compositor = GlyphCompositor(
        face,
        x=request.x,
        y=request.y,
        font_size=request.font_size,
        letter_spacing=request.letter_spacing,
        y_up=request.y_up,
        advance=config.advance,
        script=config.script,
    )
    return compositor.compose(request.text, runs)


def text_to_path_data(
    request: TextRequest,
    fonts: Mapping[str, FontFace],
    config: Config | None = None,
    cubic: bool = False,
) -> str | None:
    """Like :func:`text_to_path` but returns SVG path data.

    Raises:
        PathFormatError: a coordinate could not be formatted.
    """
    config = config or Config()
    path = text_to_path(request, fonts, config)
    if path is None:
        return None
    if cubic:
        path = path.to_cubic()
    return format_path_data(path, config.precision)


def draw_text(
    request: TextRequest,
    fonts: Mapping[str, FontFace],
    pen: AbstractPen,
    config: Config | None = None,
    cubic: bool = False,
) -> bool:
    """Draw the converted text into any fontTools pen.

    With ``cubic`` the pen only receives ``curveTo`` for curves. Returns
    False (and draws nothing) for an unknown font.
    """
    path = text_to_path(request, fonts, config)
    if path is None:
        return False
    path.draw(CubicPen(pen) if cubic else pen)
    return True


class Text2PathConverter:
    """Font table, settings and logging bundled for repeated conversions."""

    def __init__(
        self,
        fonts: Mapping[str, FontFace],
        config: Config | None = None,
        log_level: str | None = None,
    ) -> None:
        self.fonts = fonts
        self.config = config or Config()
        if log_level is not None:
            setup_logging(log_level)

    def to_path(self, request: TextRequest) -> Path | None:
        return text_to_path(request, self.fonts, self.config)

    def to_path_data(self, request: TextRequest, cubic: bool = False) -> str | None:
        return text_to_path_data(request, self.fonts, self.config, cubic=cubic)

    def draw(self, request: TextRequest, pen: AbstractPen, cubic: bool = False) -> bool:
        return draw_text(request, self.fonts, pen, self.config, cubic=cubic)
