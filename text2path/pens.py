"""Pens: the sink interface between glyph outlines and path consumers.

Any object implementing the fontTools pen protocol (``moveTo``, ``lineTo``,
``qCurveTo``, ``curveTo``, ``closePath``) can receive outlines. This module
provides the recording pen that builds a :class:`~text2path.path.Path` and a
filter pen for consumers that only understand cubic curves.
"""

from __future__ import annotations

from typing import Any

from fontTools.pens.basePen import AbstractPen, BasePen

from text2path.path import Path, Point


def elevate_quadratic(p0: Point, p1: Point, p2: Point) -> tuple[Point, Point]:
    """Return the two control points of the cubic equal to quadratic (p0, p1, p2).

    The cubic's end points are p0 and p2 unchanged.
    """
    c1 = (p0[0] + (2.0 / 3.0) * (p1[0] - p0[0]), p0[1] + (2.0 / 3.0) * (p1[1] - p0[1]))
    c2 = (p2[0] + (2.0 / 3.0) * (p1[0] - p2[0]), p2[1] + (2.0 / 3.0) * (p1[1] - p2[1]))
    return c1, c2


class PathPen(BasePen):
    """Record pen calls into a :class:`Path`.

    TrueType multi-point ``qCurveTo`` calls are split into single quadratic
    segments by :class:`BasePen`. Components are decomposed through
    ``glyphSet`` when one is given.
    """

    def __init__(self, glyphSet: Any = None) -> None:
        super().__init__(glyphSet)
        self.path = Path()

    def _moveTo(self, pt: Point) -> None:
        self.path.move_to(*pt)

    def _lineTo(self, pt: Point) -> None:
        self.path.line_to(*pt)

    def _qCurveToOne(self, pt1: Point, pt2: Point) -> None:
        self.path.quad_to(*pt1, *pt2)

    def _curveToOne(self, pt1: Point, pt2: Point, pt3: Point) -> None:
        self.path.curve_to(*pt1, *pt2, *pt3)

    def _closePath(self) -> None:
        self.path.close()

    def _endPath(self) -> None:
        # open contour: nothing to emit
        pass


class CubicPen(BasePen):
    """Forward outlines to ``outPen`` with every quadratic elevated to a cubic.

    For sinks whose primitive set lacks quadratic curves (PDF page path
    objects, for instance). The current point is tracked by :class:`BasePen`
    because the elevation needs the previous end point.
    """

    def __init__(self, outPen: AbstractPen, glyphSet: Any = None) -> None:
        super().__init__(glyphSet)
        self.outPen = outPen

    def _moveTo(self, pt: Point) -> None:
        self.outPen.moveTo(pt)

    def _lineTo(self, pt: Point) -> None:
        self.outPen.lineTo(pt)

    def _qCurveToOne(self, pt1: Point, pt2: Point) -> None:
        pt0 = self._getCurrentPoint()
        c1, c2 = elevate_quadratic(pt0, pt1, pt2)
        self.outPen.curveTo(c1, c2, pt2)

    def _curveToOne(self, pt1: Point, pt2: Point, pt3: Point) -> None:
        self.outPen.curveTo(pt1, pt2, pt3)

    def _closePath(self) -> None:
        self.outPen.closePath()

    def _endPath(self) -> None:
        self.outPen.endPath()
