#!/usr/bin/env python3
"""Example: Write converted text into a standalone SVG file.

Usage:
    python svg_document.py FONT.ttf                      # mixed Arabic/Latin demo
    python svg_document.py FONT.ttf "Hello" -o out.svg
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from text2path import FontTable, TextRequest, Text2PathConverter

DEMO_TEXT = "مرحبا بك في (Hello AV To 1231) العربية"


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("font", type=Path, help="Font file")
    parser.add_argument("text", nargs="?", default=DEMO_TEXT)
    parser.add_argument("--size", type=float, default=64.0)
    parser.add_argument("-o", "--output", type=Path, default=Path("text.svg"))
    args = parser.parse_args()

    fonts = FontTable()
    fonts.load("demo", args.font)
    converter = Text2PathConverter(fonts.freeze(), log_level="INFO")

    # screen space: Y grows downwards, baseline at y=100
    request = TextRequest(args.text, "demo", args.size, x=20, y=100)
    path = converter.to_path(request)
    if path is None:
        print("Font not found", file=sys.stderr)
        return 1

    bounds = path.bounds() or (0, 0, 0, 0)
    width = max(bounds[2] + 20, 1)
    svg = (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width:.0f}" height="150">\n'
        f'  <path fill="#8012de" d="{path.to_svg(precision=2)}"/>\n'
        "</svg>\n"
    )
    args.output.write_text(svg, encoding="utf-8")
    print(f"Wrote {args.output} ({len(path)} segments)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
