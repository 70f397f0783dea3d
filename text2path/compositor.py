"""Glyph placement.

Takes visual runs, shapes them, and lays each glyph outline into document
space with a running horizontal cursor:

- every glyph is translated to ``(x + cursor, y)`` and scaled by
  ``font_size / units_per_em`` (Y negated unless ``y_up``)
- the cursor advances by the glyph's ink extent (``x_max``) or, with
  ``advance="metric"``, by the shaper's advance
- glyphs without outline advance by the font's space advance
- letter spacing is added once after each run
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from fontTools.misc.transform import Transform

from text2path.outline import GlyphOutline, extract_outline
from text2path.path import Path
from text2path.shaping.harfbuzz import DEFAULT_SCRIPT, ShapedGlyph, shape_run

if TYPE_CHECKING:
    from text2path.fonts.face import FontFace
    from text2path.shaping.bidi import DirectionalRun

logger = logging.getLogger(__name__)


class GlyphCompositor:
    """Accumulates transformed glyph outlines for one conversion."""

    def __init__(
        self,
        face: FontFace,
        x: float,
        y: float,
        font_size: float,
        letter_spacing: float = 0.0,
        y_up: bool = False,
        advance: str = "bounds",
        script: str = DEFAULT_SCRIPT,
    ) -> None:
        if advance not in ("bounds", "metric"):
            raise ValueError(f"Unknown advance mode: {advance!r}")
        self.face = face
        self.x = x
        self.y = y
        self.letter_spacing = letter_spacing
        self.advance = advance
        self.script = script
        self.scale_x = font_size / face.units_per_em
        self.scale_y = self.scale_x if y_up else -self.scale_x
        self.space_advance = face.space_advance * self.scale_x
        self.cursor_x = 0.0
        self.path = Path()

    def transform(self) -> Transform:
        """Font-units to document-space transform at the current cursor."""
        return Transform().translate(self.x + self.cursor_x, self.y).scale(self.scale_x, self.scale_y)

    def place(self, outline: GlyphOutline, glyph: ShapedGlyph | None = None) -> None:
        self.path.extend(outline.path.transform(self.transform()))
        if self.advance == "metric" and glyph is not None:
            self.cursor_x += glyph.x_advance * self.scale_x
        else:
            self.cursor_x += outline.x_max * self.scale_x

    def skip(self) -> None:
        self.cursor_x += self.space_advance

    def end_run(self) -> None:
        self.cursor_x += self.letter_spacing

    def add_run(self, text: str, run: DirectionalRun) -> None:
        glyphs = shape_run(self.face, text[run.start:run.end], run.direction, self.script)
        for glyph in glyphs:
            outline = extract_outline(self.face, glyph.glyph_id)
            if outline is None:
                self.skip()
            else:
                self.place(outline, glyph)
        self.end_run()

    def compose(self, text: str, runs: Iterable[DirectionalRun]) -> Path:
        for run in runs:
            self.add_run(text, run)
        logger.debug("Composed %d segments, cursor at %.3f", len(self.path), self.cursor_x)
        return self.path
