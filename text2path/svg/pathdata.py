"""SVG path-data serialization.

Output uses absolute single-letter commands (``M``, ``L``, ``Q``, ``C``,
``Z``) with space-separated fields and no trailing separator. Parsing goes
through svg.path and accepts any absolute or relative path data made of
those primitives.
"""

from __future__ import annotations

import math

from svg.path import Close as SvgClose
from svg.path import CubicBezier, Line, Move, QuadraticBezier, parse_path

from text2path.exceptions import PathFormatError
from text2path.path import Path


def format_number(value: float, precision: int | None = None) -> str:
    """Format one coordinate.

    With ``precision`` None the shortest string that round-trips the float is
    used, and integral values drop their fractional part.
    """
    try:
        value = float(value)
    except (TypeError, ValueError) as e:
        raise PathFormatError(f"Not a number: {value!r}") from e
    if not math.isfinite(value):
        raise PathFormatError(f"Cannot format non-finite coordinate: {value!r}")
    if value == 0:
        # drop the sign of negative zero
        value = 0.0
    if precision is not None:
        text = f"{value:.{precision}f}"
        if text.startswith("-") and float(text) == 0:
            # small negatives round to negative zero
            text = text[1:]
        return text
    if value == 0:
        return "0"
    text = repr(value)
    if text.endswith(".0"):
        text = text[:-2]
    return text


def format_path_data(path: Path, precision: int | None = None) -> str:
    """Serialize ``path`` to an SVG ``d`` attribute string.

    An empty path serializes to the empty string.
    """
    tokens: list[str] = []
    for segment in path:
        tokens.append(segment.command)
        tokens.extend(format_number(v, precision) for v in segment.coords())
    return " ".join(tokens)


def _xy(c: complex) -> tuple[float, float]:
    return (c.real, c.imag)


def parse_path_data(d: str) -> Path:
    """Parse SVG path data into a :class:`Path`.

    Arcs have no counterpart among the path primitives and are rejected.
    """
    if not d.strip():
        return Path()
    try:
        parsed = parse_path(d)
    except (ValueError, IndexError) as e:
        raise PathFormatError(f"Invalid path data: {e}") from e

    path = Path()
    for seg in parsed:
        if isinstance(seg, Move):
            path.move_to(*_xy(seg.end))
        elif isinstance(seg, SvgClose):
            path.close()
        elif isinstance(seg, Line):
            path.line_to(*_xy(seg.end))
        elif isinstance(seg, QuadraticBezier):
            path.quad_to(*_xy(seg.control), *_xy(seg.end))
        elif isinstance(seg, CubicBezier):
            path.curve_to(*_xy(seg.control1), *_xy(seg.control2), *_xy(seg.end))
        else:
            raise PathFormatError(f"Unsupported path segment: {type(seg).__name__}")
    return path


__all__ = ["format_number", "format_path_data", "parse_path_data"]
