"""Unit tests for text2path.shaping.bidi."""

import pytest

from text2path.shaping import (
    DirectionalRun,
    detect_base_direction,
    first_paragraph,
    get_visual_runs,
    isolates_to_embeddings,
    split_paragraphs,
)
from text2path.shaping import bidi as bidi_module

ALEF = "ا"
BEH = "ب"
HEBREW_ALEF = "א"
LRI, RLI, FSI, PDI = "\u2066", "\u2067", "\u2068", "\u2069"
LRE, RLE, PDF = "\u202a", "\u202b", "\u202c"


class TestSplitParagraphs:
    """Paragraph boundary detection."""

    def test_empty_text_has_no_paragraphs(self) -> None:
        assert split_paragraphs("") == []
        assert first_paragraph("") is None

    def test_single_paragraph(self) -> None:
        assert split_paragraphs("hello") == [(0, 5)]

    def test_separator_is_excluded(self) -> None:
        assert split_paragraphs("ab\ncd") == [(0, 2), (3, 5)]

    def test_crlf_is_one_separator(self) -> None:
        assert split_paragraphs("a\r\nb") == [(0, 1), (3, 4)]

    def test_trailing_separator(self) -> None:
        assert split_paragraphs("ab\n") == [(0, 2)]

    def test_unicode_paragraph_separator(self) -> None:
        assert split_paragraphs("ab\u2029cd") == [(0, 2), (3, 5)]

    def test_leading_separator_gives_empty_first_paragraph(self) -> None:
        assert first_paragraph("\nabc") == (0, 0)


class TestBaseDirection:
    """First strong character decides the paragraph direction."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [("abc", "ltr"), (f"{ALEF}{BEH}", "rtl"), (f"123 {HEBREW_ALEF}", "rtl"), ("123", "ltr"), ("", "ltr")],
    )
    def test_detect(self, text: str, expected: str) -> None:
        assert detect_base_direction(text) == expected


class TestVisualRuns:
    """Runs are produced in visual (display) order."""

    def test_empty_text(self) -> None:
        assert get_visual_runs("") == []

    def test_only_separator(self) -> None:
        assert get_visual_runs("\n") == []

    def test_pure_ltr(self) -> None:
        assert get_visual_runs("Hello") == [DirectionalRun(0, 5, 0)]

    def test_pure_rtl(self) -> None:
        runs = get_visual_runs(f"{ALEF}{BEH}")
        assert runs == [DirectionalRun(0, 2, 1)]
        assert runs[0].is_rtl
        assert runs[0].direction == "rtl"

    def test_latin_then_arabic(self) -> None:
        text = f"AB {ALEF}{BEH}"
        assert get_visual_runs(text) == [DirectionalRun(0, 3, 0), DirectionalRun(3, 5, 1)]

    def test_arabic_then_latin_reorders(self) -> None:
        # RTL paragraph: the embedded Latin word is displayed leftmost
        text = f"{ALEF}{BEH} AB"
        runs = get_visual_runs(text)
        assert runs == [DirectionalRun(3, 5, 2), DirectionalRun(0, 3, 1)]
        assert [r.direction for r in runs] == ["ltr", "rtl"]

    def test_latin_embedded_in_arabic(self) -> None:
        text = f"{ALEF} AB {BEH}"
        runs = get_visual_runs(text)
        # visual: BEH, space, AB, space, ALEF
        assert runs == [DirectionalRun(4, 6, 1), DirectionalRun(2, 4, 2), DirectionalRun(0, 2, 1)]

    def test_only_first_paragraph_is_used(self) -> None:
        assert get_visual_runs(f"AB\n{ALEF}{BEH}") == [DirectionalRun(0, 2, 0)]

    def test_runs_cover_paragraph(self) -> None:
        text = f"one {ALEF}{BEH} two {BEH} three"
        runs = get_visual_runs(text)
        covered = sorted(i for r in runs for i in range(r.start, r.end))
        assert covered == list(range(len(text)))

    def test_run_length(self) -> None:
        assert len(DirectionalRun(3, 8, 0)) == 5

    def test_number_inside_arabic(self) -> None:
        # digits resolve to level 2 inside the RTL paragraph
        text = f"{ALEF} 12 {BEH}"
        assert get_visual_runs(text) == [
            DirectionalRun(4, 6, 1),
            DirectionalRun(2, 4, 2),
            DirectionalRun(0, 2, 1),
        ]

    def test_explicit_embedding(self) -> None:
        text = f"AB {RLE}{ALEF}{BEH}{PDF}"
        assert get_visual_runs(text) == [DirectionalRun(0, 3, 0), DirectionalRun(4, 6, 1)]


class TestIsolates:
    """Directional isolates are resolved as embeddings."""

    def test_rewrite_keeps_length(self) -> None:
        text = f"AB {RLI}{ALEF}{BEH}{PDI} {LRI}CD{PDI}"
        rewritten = isolates_to_embeddings(text)
        assert rewritten == f"AB {RLE}{ALEF}{BEH}{PDF} {LRE}CD{PDF}"
        assert len(rewritten) == len(text)

    def test_text_without_isolates_is_unchanged(self) -> None:
        text = f"AB {RLE}{ALEF}{PDF}"
        assert isolates_to_embeddings(text) is text

    @pytest.mark.parametrize(("content", "opener"), [(f"{ALEF}B", RLE), (f"1 B{ALEF}", LRE), ("12", LRE)])
    def test_first_strong_isolate(self, content: str, opener: str) -> None:
        assert isolates_to_embeddings(f"{FSI}{content}{PDI}") == f"{opener}{content}{PDF}"

    def test_first_strong_isolate_skips_nested_isolates(self) -> None:
        text = f"{FSI}{LRI}AB{PDI}{ALEF}{PDI}"
        assert isolates_to_embeddings(text)[0] == RLE

    def test_unmatched_pdi_is_dropped(self) -> None:
        assert isolates_to_embeddings(f"A{PDI}B") == "A\u2060B"
        assert get_visual_runs(f"A{PDI}B") == [DirectionalRun(0, 3, 0)]

    def test_rtl_isolate_in_ltr_text(self) -> None:
        text = f"AB {RLI}{ALEF}{BEH}{PDI}"
        assert get_visual_runs(text) == [DirectionalRun(0, 3, 0), DirectionalRun(4, 6, 1)]

    def test_isolate_wrapping_whole_text(self) -> None:
        # displayed as the Arabic word followed by "AB"
        text = f"{RLI}AB {ALEF}{BEH}{PDI}"
        assert get_visual_runs(text) == [DirectionalRun(3, 6, 1), DirectionalRun(1, 3, 2)]

    def test_base_direction_ignores_isolated_text(self) -> None:
        assert detect_base_direction(f"{RLI}{ALEF}{PDI} AB") == "ltr"
        assert detect_base_direction(f"{LRI}AB{PDI}{ALEF}") == "rtl"

    def test_resolver_failure_falls_back_to_one_run(self, monkeypatch) -> None:
        def fail(storage, debug=False):
            raise AssertionError("unsupported")

        monkeypatch.setattr(bidi_module.algorithm, "resolve_weak_types", fail)
        assert get_visual_runs(f"{ALEF}{BEH} AB\nCD") == [DirectionalRun(0, 5, 1)]
