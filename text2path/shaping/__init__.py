"""Text shaping for text2path.

This subpackage provides:
- HarfBuzz text shaping wrapper
- BiDi (bidirectional) text handling
- Visual run processing
"""

from text2path.shaping.bidi import (
    DirectionalRun,
    detect_base_direction,
    first_paragraph,
    get_visual_runs,
    isolates_to_embeddings,
    split_paragraphs,
)
from text2path.shaping.harfbuzz import (
    DEFAULT_SCRIPT,
    ShapedGlyph,
    create_hb_buffer,
    shape_run,
)

__all__ = [
    "shape_run",
    "create_hb_buffer",
    "ShapedGlyph",
    "DEFAULT_SCRIPT",
    "get_visual_runs",
    "split_paragraphs",
    "first_paragraph",
    "detect_base_direction",
    "isolates_to_embeddings",
    "DirectionalRun",
]
