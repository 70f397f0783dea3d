"""Pytest configuration and shared fixtures for text2path tests.

Fonts are built in memory with fontTools' FontBuilder so tests never depend
on system fonts. Every outlined test glyph is a 100-unit wide rectangle whose
height identifies it, which makes glyph order visible in the output path.
"""

from collections.abc import Callable
from io import BytesIO
from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import TTFont

from text2path import FontFace, FontTable, Path as VectorPath

UNITS_PER_EM = 1000
SPACE_ADVANCE = 250

# glyph name -> (codepoint, x_min, height, advance)
RECT_GLYPHS = {
    "A": (0x41, 0, 100, 120),
    "B": (0x42, 0, 200, 120),
    "I": (0x49, 50, 150, 300),
    "alef": (0x0627, 0, 300, 120),
    "beh": (0x0628, 0, 400, 120),
    "one": (0x31, 0, 50, 120),
    "two": (0x32, 0, 250, 120),
}
HEIGHT_OF = {name: entry[2] for name, entry in RECT_GLYPHS.items()}


def _rect(x_min: int, height: int):
    pen = TTGlyphPen(None)
    pen.moveTo((x_min, 0))
    pen.lineTo((x_min, height))
    pen.lineTo((x_min + 100, height))
    pen.lineTo((x_min + 100, 0))
    pen.closePath()
    return pen.glyph()


def _bowl():
    pen = TTGlyphPen(None)
    pen.moveTo((0, 0))
    pen.qCurveTo((0, 100), (100, 100))
    pen.qCurveTo((200, 150), (200, 0))
    pen.closePath()
    return pen.glyph()


def _empty():
    return TTGlyphPen(None).glyph()


def build_test_font(with_space: bool = True) -> TTFont:
    """Build and round-trip a small TrueType font."""
    glyph_order = [".notdef"]
    cmap: dict[int, str] = {}
    glyphs = {".notdef": _empty()}
    advances = {".notdef": 500}

    if with_space:
        glyph_order.append("space")
        cmap[0x20] = "space"
        glyphs["space"] = _empty()
        advances["space"] = SPACE_ADVANCE

    for name, (codepoint, x_min, height, advance) in RECT_GLYPHS.items():
        glyph_order.append(name)
        cmap[codepoint] = name
        glyphs[name] = _rect(x_min, height)
        advances[name] = advance

    glyph_order.append("o")
    cmap[ord("o")] = "o"
    glyphs["o"] = _bowl()
    advances["o"] = 220

    fb = FontBuilder(UNITS_PER_EM, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap(cmap)
    fb.setupGlyf(glyphs)
    glyf = fb.font["glyf"]
    fb.setupHorizontalMetrics(
        {name: (advances[name], getattr(glyf[name], "xMin", 0)) for name in glyph_order}
    )
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": "Text2Path Test", "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200)
    fb.setupPost()

    buf = BytesIO()
    fb.font.save(buf)
    buf.seek(0)
    return TTFont(buf)


@pytest.fixture(scope="session")
def test_ttfont() -> TTFont:
    return build_test_font()


@pytest.fixture
def face(test_ttfont: TTFont) -> FontFace:
    """FontFace over the synthetic test font."""
    return FontFace.from_ttfont(test_ttfont)


@pytest.fixture
def fonts(face: FontFace) -> FontTable:
    """Frozen font table with the test font under key 'test'."""
    table = FontTable()
    table.add("test", face)
    return table.freeze()


@pytest.fixture
def font_file(tmp_path: Path, test_ttfont: TTFont) -> Path:
    """The test font written to disk."""
    path = tmp_path / "test.ttf"
    test_ttfont.save(str(path))
    return path


@pytest.fixture
def glyph_id(test_ttfont: TTFont) -> Callable[[str], int]:
    return test_ttfont.getGlyphID


def split_contours(path: VectorPath) -> list[VectorPath]:
    """Split a path into one sub-path per MoveTo."""
    contours: list[VectorPath] = []
    for seg in path:
        if seg.command == "M":
            contours.append(VectorPath())
        contours[-1].append(seg)
    return contours


def contour_heights(path: VectorPath) -> list[float]:
    """Height of each contour, in drawing order (works for either Y orientation)."""
    heights = []
    for contour in split_contours(path):
        _, y_min, _, y_max = contour.bounds()
        heights.append(round(y_max - y_min, 6))
    return heights


def contour_left_edges(path: VectorPath) -> list[float]:
    return [round(contour.bounds()[0], 6) for contour in split_contours(path)]
