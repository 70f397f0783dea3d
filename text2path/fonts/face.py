"""Parsed font faces.

A :class:`FontFace` bundles a fontTools ``TTFont`` with the raw font bytes
HarfBuzz needs, and exposes the handful of metrics the conversion pipeline
reads. Faces are read-only once loaded.
"""

from __future__ import annotations

import logging
import struct
from io import BytesIO
from pathlib import Path

import uharfbuzz as hb
from fontTools.ttLib import TTFont, TTLibError

from text2path.exceptions import FontLoadError

logger = logging.getLogger(__name__)

SPACE = 0x20


class FontFace:
    """A font plus its HarfBuzz counterpart."""

    def __init__(self, ttfont: TTFont, data: bytes | None = None, index: int = 0) -> None:
        self.ttfont = ttfont
        self.index = index
        self._data = data
        self._hb_font: hb.Font | None = None
        self._glyph_set = None
        self._glyph_order: list[str] | None = None
        self._space_advance: int | None = None

    @classmethod
    def from_file(cls, path: Path | str, index: int = 0) -> FontFace:
        """Load face ``index`` of a TTF/OTF/TTC file."""
        path = Path(path)
        try:
            data = path.read_bytes()
            ttfont = TTFont(BytesIO(data), fontNumber=index)
        except (OSError, TTLibError, struct.error) as e:
            raise FontLoadError(str(path), str(e)) from e
        logger.debug("Loaded font %s:%d", path.name, index)
        return cls(ttfont, data, index)

    @classmethod
    def from_ttfont(cls, ttfont: TTFont) -> FontFace:
        """Wrap an already parsed (or freshly built) ``TTFont``."""
        return cls(ttfont)

    @property
    def data(self) -> bytes:
        if self._data is None:
            buf = BytesIO()
            self.ttfont.save(buf)
            self._data = buf.getvalue()
        return self._data

    @property
    def units_per_em(self) -> int:
        return self.ttfont["head"].unitsPerEm

    @property
    def glyph_set(self):
        if self._glyph_set is None:
            self._glyph_set = self.ttfont.getGlyphSet()
        return self._glyph_set

    def glyph_name(self, glyph_id: int) -> str | None:
        if self._glyph_order is None:
            self._glyph_order = self.ttfont.getGlyphOrder()
        if 0 <= glyph_id < len(self._glyph_order):
            return self._glyph_order[glyph_id]
        return None

    @property
    def hb_font(self) -> hb.Font:
        if self._hb_font is None:
            face = hb.Face(hb.Blob(self.data), self.index)
            font = hb.Font(face)
            # shape in font units
            font.scale = (self.units_per_em, self.units_per_em)
            self._hb_font = font
        return self._hb_font

    def advance_width(self, glyph_id: int) -> int:
        """Horizontal advance of a glyph in font units (0 if unknown)."""
        name = self.glyph_name(glyph_id)
        if name is None or "hmtx" not in self.ttfont:
            return 0
        try:
            return self.ttfont["hmtx"][name][0]
        except KeyError:
            return 0

    @property
    def space_advance(self) -> int:
        """Advance of the glyph mapped to U+0020, or 0 when the font has none."""
        if self._space_advance is None:
            cmap = self.ttfont.getBestCmap() or {}
            name = cmap.get(SPACE)
            if name is None:
                self._space_advance = 0
            else:
                self._space_advance = self.advance_width(self.ttfont.getGlyphID(name))
        return self._space_advance

    def ensure_loaded(self) -> None:
        """Decompile everything lazily loaded so the face can be shared across threads."""
        self.ttfont.ensureDecompiled()
        _ = self.glyph_set
        self.glyph_name(0)
        _ = self.space_advance
        _ = self.hb_font

    def __repr__(self) -> str:
        return f"<FontFace upem={self.units_per_em} index={self.index}>"
