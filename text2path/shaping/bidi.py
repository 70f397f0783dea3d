"""Bidirectional text handling.

Levels come from the Unicode Bidirectional Algorithm as implemented by
python-bidi (``bidi.algorithm``). Only the first paragraph of a text is laid
out; the rest is dropped.
"""

from __future__ import annotations

import logging
import unicodedata
from dataclasses import dataclass

from bidi import algorithm

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectionalRun:
    """A maximal span of one embedding level, ``text[start:end]``."""

    start: int
    end: int
    level: int

    @property
    def is_rtl(self) -> bool:
        return self.level % 2 == 1

    @property
    def direction(self) -> str:
        return "rtl" if self.is_rtl else "ltr"

    def __len__(self) -> int:
        return self.end - self.start


def split_paragraphs(text: str) -> list[tuple[int, int]]:
    """Return ``(start, end)`` of each paragraph, separators excluded.

    A paragraph ends at any character of bidi class B; CR LF is one separator.
    Empty text has no paragraphs.
    """
    paragraphs: list[tuple[int, int]] = []
    start = 0
    i = 0
    n = len(text)
    while i < n:
        if unicodedata.bidirectional(text[i]) == "B":
            paragraphs.append((start, i))
            if text[i] == "\r" and i + 1 < n and text[i + 1] == "\n":
                i += 1
            start = i + 1
        i += 1
    if start < n:
        paragraphs.append((start, n))
    return paragraphs


def first_paragraph(text: str) -> tuple[int, int] | None:
    paragraphs = split_paragraphs(text)
    if not paragraphs:
        return None
    if len(paragraphs) > 1:
        logger.debug("Dropping %d trailing paragraph(s)", len(paragraphs) - 1)
    return paragraphs[0]


LRI, RLI, FSI, PDI = "\u2066", "\u2067", "\u2068", "\u2069"
LRE, RLE, PDF = "\u202a", "\u202b", "\u202c"
WORD_JOINER = "\u2060"
ISOLATE_INITIATORS = (LRI, RLI, FSI)


def _first_strong_level(text: str) -> int:
    """Rules P2 and P3: level of the first strong character outside isolates."""
    depth = 0
    for ch in text:
        if ch in ISOLATE_INITIATORS:
            depth += 1
        elif ch == PDI:
            if depth:
                depth -= 1
        elif depth == 0:
            bidi_type = unicodedata.bidirectional(ch)
            if bidi_type == "L":
                return 0
            if bidi_type in ("R", "AL"):
                return 1
    return 0


def _matching_pdi(text: str, start: int) -> int:
    """Index of the PDI closing the isolate opened at ``start``, or ``len(text)``."""
    depth = 0
    for i in range(start + 1, len(text)):
        ch = text[i]
        if ch in ISOLATE_INITIATORS:
            depth += 1
        elif ch == PDI:
            if depth == 0:
                return i
            depth -= 1
    return len(text)


def isolates_to_embeddings(text: str) -> str:
    """Rewrite directional isolates as the equivalent embeddings.

    ``bidi.algorithm`` predates isolates (Unicode 6.3) and rejects them.
    LRI and RLI become LRE and RLE, FSI becomes whichever of the two matches
    the first strong character of its content, and a matched PDI becomes
    PDF. An unmatched PDI becomes a word joiner, which rule X9 removes. The
    result has the same length, so character indices are preserved.
    """
    if not any(ch in text for ch in (LRI, RLI, FSI, PDI)):
        return text
    out: list[str] = []
    open_isolates = 0
    for i, ch in enumerate(text):
        if ch == LRI:
            out.append(LRE)
        elif ch == RLI:
            out.append(RLE)
        elif ch == FSI:
            content = text[i + 1:_matching_pdi(text, i)]
            out.append(RLE if _first_strong_level(content) else LRE)
        elif ch == PDI:
            if open_isolates:
                out.append(PDF)
                open_isolates -= 1
            else:
                out.append(WORD_JOINER)
            continue
        else:
            out.append(ch)
            continue
        open_isolates += 1
    return "".join(out)


def detect_base_direction(text: str) -> str:
    """Direction of the first strong character ("ltr" when there is none).

    Characters inside directional isolates are skipped.
    """
    return "rtl" if _first_strong_level(text) else "ltr"


def _resolve_visual_chars(text: str) -> list[dict]:
    """Run the bidi algorithm and return per-character records in visual order.

    Each record carries the resolved ``level`` and the logical ``index`` of
    its character. Explicit formatting characters removed by rule X9 are
    absent.
    """
    storage = algorithm.get_empty_storage()
    base_level = _first_strong_level(text)
    storage["base_level"] = base_level
    storage["base_dir"] = ("L", "R")[base_level]

    algorithm.get_embedding_levels(isolates_to_embeddings(text), storage)
    for index, ch in enumerate(storage["chars"]):
        ch["index"] = index

    algorithm.explicit_embed_and_overrides(storage)
    algorithm.resolve_weak_types(storage)
    algorithm.resolve_neutral_types(storage, False)
    algorithm.resolve_implicit_levels(storage, False)
    # L1 and L2: reset trailing whitespace, then reverse into display order
    algorithm.reorder_resolved_levels(storage, False)
    return storage["chars"]


def get_visual_runs(text: str) -> list[DirectionalRun]:
    """Split the first paragraph of ``text`` into runs in visual order.

    Runs are returned left to right as displayed; each covers a logical
    range of ``text`` at a single embedding level. If the resolver rejects
    the paragraph it is laid out as a single run at its base level.
    """
    paragraph = first_paragraph(text)
    if paragraph is None:
        return []
    p_start, p_end = paragraph
    if p_start == p_end:
        return []

    paragraph_text = text[p_start:p_end]
    try:
        chars = _resolve_visual_chars(paragraph_text)
    except AssertionError as e:
        logger.warning("Bidi resolution failed, using a single run: %s", e)
        return [DirectionalRun(p_start, p_end, _first_strong_level(paragraph_text))]

    runs: list[DirectionalRun] = []
    group: list[dict] = []
    for ch in chars:
        if group and ch["level"] != group[-1]["level"]:
            runs.append(_make_run(group, p_start))
            group = []
        group.append(ch)
    if group:
        runs.append(_make_run(group, p_start))
    return runs


def _make_run(group: list[dict], offset: int) -> DirectionalRun:
    indices = [ch["index"] for ch in group]
    return DirectionalRun(
        start=offset + min(indices),
        end=offset + max(indices) + 1,
        level=group[0]["level"],
    )
