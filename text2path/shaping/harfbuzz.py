"""HarfBuzz text shaping.

Each directional run is shaped on its own with a fixed script tag (Arabic by
default). Runs in other scripts go through the same shaper; HarfBuzz falls
back to plain cmap mapping for characters the script's shaper does not
handle. Pass ``script="auto"`` to let HarfBuzz guess the script per run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import uharfbuzz as hb

if TYPE_CHECKING:
    from text2path.fonts.face import FontFace

logger = logging.getLogger(__name__)

DEFAULT_SCRIPT = "Arab"
AUTO_SCRIPT = "auto"


@dataclass(frozen=True)
class ShapedGlyph:
    """One glyph of shaper output, in font units."""

    glyph_id: int
    cluster: int
    x_advance: int


def create_hb_buffer(text: str, direction: str, script: str = DEFAULT_SCRIPT) -> hb.Buffer:
    buf = hb.Buffer()
    buf.add_str(text)
    buf.direction = direction
    if script != AUTO_SCRIPT:
        buf.script = script
    # fills in language (and script when not set)
    buf.guess_segment_properties()
    return buf


def shape_run(
    face: FontFace,
    text: str,
    direction: str,
    script: str = DEFAULT_SCRIPT,
    features: dict[str, bool | int] | None = None,
) -> list[ShapedGlyph]:
    """Shape ``text`` and return its glyphs in visual order.

    Args:
        face: Font to shape with.
        text: The run's characters, in logical order.
        direction: ``"ltr"`` or ``"rtl"``.
        script: ISO 15924 tag applied to the whole run, or ``"auto"``.
        features: OpenType feature settings passed to ``hb.shape``.
    """
    if direction not in ("ltr", "rtl"):
        raise ValueError(f"direction must be 'ltr' or 'rtl', got {direction!r}")
    if not text:
        return []

    buf = create_hb_buffer(text, direction, script)
    hb.shape(face.hb_font, buf, features or {})

    glyphs = [
        ShapedGlyph(glyph_id=info.codepoint, cluster=info.cluster, x_advance=pos.x_advance)
        for info, pos in zip(buf.glyph_infos, buf.glyph_positions)
    ]
    logger.debug("Shaped %r (%s) into %d glyphs", text, direction, len(glyphs))
    return glyphs
