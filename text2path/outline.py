"""Glyph outline extraction.

Outlines are drawn in font design units, either straight into a caller's pen
(:func:`draw_glyph`) or into a fresh scratch :class:`~text2path.path.Path`
(:func:`extract_outline`).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from text2path.path import Path
from text2path.pens import PathPen

if TYPE_CHECKING:
    from fontTools.pens.basePen import AbstractPen

    from text2path.fonts.face import FontFace

logger = logging.getLogger(__name__)

NOTDEF_GLYPH_ID = 0


@dataclass
class GlyphOutline:
    """A glyph's outline in font units with its horizontal ink extent."""

    glyph_id: int
    path: Path
    x_max: float


def _lookup_glyph(face: FontFace, glyph_id: int):
    if glyph_id == NOTDEF_GLYPH_ID:
        return None
    name = face.glyph_name(glyph_id)
    if name is None:
        return None
    return face.glyph_set.get(name)


def draw_glyph(face: FontFace, glyph_id: int, pen: AbstractPen) -> bool:
    """Draw glyph ``glyph_id`` into ``pen``.

    Returns False for unmapped glyphs (including ``.notdef``). Drawing errors
    propagate; the pen may have received a partial outline.
    """
    glyph = _lookup_glyph(face, glyph_id)
    if glyph is None:
        return False
    glyph.draw(pen)
    return True


def extract_outline(face: FontFace, glyph_id: int) -> GlyphOutline | None:
    """Decompose a glyph into a scratch path.

    Returns None when the glyph has no outline: unmapped, empty (space), or
    failing to draw.
    """
    pen = PathPen(face.glyph_set)
    try:
        if not draw_glyph(face, glyph_id, pen):
            return None
    except Exception as e:
        logger.debug("Glyph %d failed to draw, treating as empty: %s", glyph_id, e)
        return None

    bounds = pen.path.bounds()
    if bounds is None:
        return None
    return GlyphOutline(glyph_id=glyph_id, path=pen.path, x_max=bounds[2])
