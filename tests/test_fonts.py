"""Unit tests for text2path.fonts (FontFace and FontTable)."""

import pytest

from text2path import FontFace, FontLoadError, FontTable, FontTableFrozenError

from conftest import SPACE_ADVANCE, UNITS_PER_EM, build_test_font


class TestFontFace:
    """Metrics and lazy resources of a face."""

    def test_units_per_em(self, face) -> None:
        assert face.units_per_em == UNITS_PER_EM

    def test_space_advance(self, face) -> None:
        assert face.space_advance == SPACE_ADVANCE

    def test_space_advance_without_space_glyph(self) -> None:
        face = FontFace.from_ttfont(build_test_font(with_space=False))
        assert face.space_advance == 0

    def test_space_advance_matches_space_glyph_metric(self, face, glyph_id) -> None:
        assert face.space_advance == face.advance_width(glyph_id("space"))

    def test_glyph_name(self, face, glyph_id) -> None:
        assert face.glyph_name(0) == ".notdef"
        assert face.glyph_name(glyph_id("A")) == "A"
        assert face.glyph_name(-1) is None
        assert face.glyph_name(99_999) is None

    def test_advance_width(self, face, glyph_id) -> None:
        assert face.advance_width(glyph_id("I")) == 300
        assert face.advance_width(99_999) == 0

    def test_data_is_serialized_on_demand(self, face) -> None:
        assert face.data[:4] == b"\x00\x01\x00\x00"

    def test_hb_font_scale_is_units_per_em(self, face) -> None:
        assert face.hb_font.scale == (UNITS_PER_EM, UNITS_PER_EM)

    def test_from_file(self, font_file) -> None:
        face = FontFace.from_file(font_file)
        assert face.units_per_em == UNITS_PER_EM
        assert face.index == 0

    def test_from_missing_file(self, tmp_path) -> None:
        with pytest.raises(FontLoadError, match="Cannot load font"):
            FontFace.from_file(tmp_path / "nope.ttf")

    def test_from_garbage_file(self, tmp_path) -> None:
        bad = tmp_path / "bad.ttf"
        bad.write_bytes(b"definitely not a font")
        with pytest.raises(FontLoadError):
            FontFace.from_file(bad)


class TestFontTable:
    """Keyed, freezable collection of faces."""

    def test_mapping_behaviour(self, face) -> None:
        table = FontTable({"a": face})
        table.add("b", face)
        assert sorted(table) == ["a", "b"]
        assert len(table) == 2
        assert table["a"] is face
        assert table.get("missing") is None
        assert "b" in table

    def test_load(self, font_file) -> None:
        table = FontTable()
        face = table.load("test", font_file)
        assert table["test"] is face

    def test_freeze_rejects_writes(self, face, font_file) -> None:
        table = FontTable({"a": face}).freeze()
        assert table.frozen
        with pytest.raises(FontTableFrozenError):
            table.add("b", face)
        with pytest.raises(FontTableFrozenError):
            table.load("c", font_file)

    def test_freeze_returns_table(self) -> None:
        table = FontTable()
        assert table.freeze() is table
