#!/usr/bin/env python3
"""Example: Feed converted text to a sink without quadratic curves.

PDF content streams only know cubic Beziers (``c``). This example implements
a tiny pen that writes PDF path operators and wraps it in ``CubicPen`` so the
TrueType quadratics are elevated on the way.

Usage:
    python pdf_path_operators.py FONT.ttf "Hello"
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from fontTools.pens.basePen import AbstractPen

from text2path import FontTable, TextRequest, draw_text


class PDFOperatorPen(AbstractPen):
    """Collect PDF path-construction operators (m, l, c, h)."""

    def __init__(self) -> None:
        self.ops: list[str] = []

    def _fmt(self, *pts) -> str:
        return " ".join(f"{v:.3f}" for pt in pts for v in pt)

    def moveTo(self, pt) -> None:
        self.ops.append(f"{self._fmt(pt)} m")

    def lineTo(self, pt) -> None:
        self.ops.append(f"{self._fmt(pt)} l")

    def curveTo(self, *points) -> None:
        self.ops.append(f"{self._fmt(*points)} c")

    def qCurveTo(self, *points) -> None:
        raise NotImplementedError("PDF has no quadratic curves")

    def closePath(self) -> None:
        self.ops.append("h")

    def endPath(self) -> None:
        pass

    def addComponent(self, glyphName, transformation) -> None:
        raise NotImplementedError


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("font", type=Path)
    parser.add_argument("text")
    parser.add_argument("--size", type=float, default=64.0)
    args = parser.parse_args()

    fonts = FontTable()
    fonts.load("demo", args.font)

    # print space: Y grows upwards, so keep the font orientation
    request = TextRequest(args.text, "demo", args.size, x=20, y=100, y_up=True)
    pen = PDFOperatorPen()
    if not draw_text(request, fonts.freeze(), pen, cubic=True):
        print("Font not found", file=sys.stderr)
        return 1

    print("\n".join(pen.ops + ["f"]))
    return 0


if __name__ == "__main__":
    sys.exit(main())
