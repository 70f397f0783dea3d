"""Structured vector paths.

A :class:`Path` is an append-only sequence of drawing primitives. Segments
replay into any fontTools pen via :meth:`Path.draw`, which is how paths reach
rendering backends (canvas builders, PDF path objects, SVG writers).
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Union

from fontTools.misc.arrayTools import calcBounds

if TYPE_CHECKING:
    from fontTools.misc.transform import Transform
    from fontTools.pens.basePen import AbstractPen

Point = tuple[float, float]


@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float

    command: ClassVar[str] = "M"

    def coords(self) -> tuple[float, ...]:
        return (self.x, self.y)

    @property
    def end(self) -> Point:
        return (self.x, self.y)

    def points(self) -> list[Point]:
        return [(self.x, self.y)]

    def transform(self, t: Transform) -> MoveTo:
        return MoveTo(*t.transformPoint((self.x, self.y)))

    def draw(self, pen: AbstractPen) -> None:
        pen.moveTo((self.x, self.y))


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float

    command: ClassVar[str] = "L"

    def coords(self) -> tuple[float, ...]:
        return (self.x, self.y)

    @property
    def end(self) -> Point:
        return (self.x, self.y)

    def points(self) -> list[Point]:
        return [(self.x, self.y)]

    def transform(self, t: Transform) -> LineTo:
        return LineTo(*t.transformPoint((self.x, self.y)))

    def draw(self, pen: AbstractPen) -> None:
        pen.lineTo((self.x, self.y))


@dataclass(frozen=True)
class QuadTo:
    cx: float
    cy: float
    x: float
    y: float

    command: ClassVar[str] = "Q"

    def coords(self) -> tuple[float, ...]:
        return (self.cx, self.cy, self.x, self.y)

    @property
    def end(self) -> Point:
        return (self.x, self.y)

    def points(self) -> list[Point]:
        return [(self.cx, self.cy), (self.x, self.y)]

    def transform(self, t: Transform) -> QuadTo:
        return QuadTo(*t.transformPoint((self.cx, self.cy)), *t.transformPoint((self.x, self.y)))

    def draw(self, pen: AbstractPen) -> None:
        pen.qCurveTo((self.cx, self.cy), (self.x, self.y))


@dataclass(frozen=True)
class CubicTo:
    c1x: float
    c1y: float
    c2x: float
    c2y: float
    x: float
    y: float

    command: ClassVar[str] = "C"

    def coords(self) -> tuple[float, ...]:
        return (self.c1x, self.c1y, self.c2x, self.c2y, self.x, self.y)

    @property
    def end(self) -> Point:
        return (self.x, self.y)

    def points(self) -> list[Point]:
        return [(self.c1x, self.c1y), (self.c2x, self.c2y), (self.x, self.y)]

    def transform(self, t: Transform) -> CubicTo:
        return CubicTo(
            *t.transformPoint((self.c1x, self.c1y)),
            *t.transformPoint((self.c2x, self.c2y)),
            *t.transformPoint((self.x, self.y)),
        )

    def draw(self, pen: AbstractPen) -> None:
        pen.curveTo((self.c1x, self.c1y), (self.c2x, self.c2y), (self.x, self.y))


@dataclass(frozen=True)
class Close:
    command: ClassVar[str] = "Z"

    def coords(self) -> tuple[float, ...]:
        return ()

    @property
    def end(self) -> None:
        return None

    def points(self) -> list[Point]:
        return []

    def transform(self, t: Transform) -> Close:
        return self

    def draw(self, pen: AbstractPen) -> None:
        pen.closePath()


PathSegment = Union[MoveTo, LineTo, QuadTo, CubicTo, Close]


class Path:
    """Append-only sequence of :data:`PathSegment`."""

    __slots__ = ("_segments",)

    def __init__(self, segments: Iterable[PathSegment] = ()) -> None:
        self._segments: list[PathSegment] = list(segments)

    # -- building -----------------------------------------------------------

    def append(self, segment: PathSegment) -> None:
        self._segments.append(segment)

    def extend(self, segments: Iterable[PathSegment]) -> None:
        self._segments.extend(segments)

    def move_to(self, x: float, y: float) -> None:
        self._segments.append(MoveTo(x, y))

    def line_to(self, x: float, y: float) -> None:
        self._segments.append(LineTo(x, y))

    def quad_to(self, cx: float, cy: float, x: float, y: float) -> None:
        self._segments.append(QuadTo(cx, cy, x, y))

    def curve_to(self, c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float) -> None:
        self._segments.append(CubicTo(c1x, c1y, c2x, c2y, x, y))

    def close(self) -> None:
        self._segments.append(Close())

    # -- sequence protocol --------------------------------------------------

    @property
    def segments(self) -> tuple[PathSegment, ...]:
        return tuple(self._segments)

    def __iter__(self) -> Iterator[PathSegment]:
        return iter(self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    def __bool__(self) -> bool:
        return bool(self._segments)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Path(self._segments[index])
        return self._segments[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._segments == other._segments

    def __repr__(self) -> str:
        return f"Path({self._segments!r})"

    # -- geometry -----------------------------------------------------------

    def points(self) -> list[Point]:
        """All on- and off-curve points in drawing order."""
        pts: list[Point] = []
        for seg in self._segments:
            pts.extend(seg.points())
        return pts

    def bounds(self) -> tuple[float, float, float, float] | None:
        """Control-point bounds ``(xMin, yMin, xMax, yMax)``, or None when empty."""
        pts = self.points()
        if not pts:
            return None
        return calcBounds(pts)

    def transform(self, t: Transform) -> Path:
        return Path(seg.transform(t) for seg in self._segments)

    # -- output -------------------------------------------------------------

    def draw(self, pen: AbstractPen) -> None:
        """Replay the segments into a fontTools pen."""
        for seg in self._segments:
            seg.draw(pen)

    def to_cubic(self) -> Path:
        """Return an equivalent path with quadratic segments elevated to cubic."""
        from text2path.pens import CubicPen, PathPen

        pen = PathPen()
        self.draw(CubicPen(pen))
        return pen.path

    def to_svg(self, precision: int | None = None) -> str:
        from text2path.svg.pathdata import format_path_data

        return format_path_data(self, precision)

    @classmethod
    def from_svg(cls, d: str) -> Path:
        from text2path.svg.pathdata import parse_path_data

        return parse_path_data(d)
