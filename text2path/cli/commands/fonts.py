"""Fonts command - inspect the metrics a font contributes to conversion."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from text2path.exceptions import FontLoadError
from text2path.fonts import FontFace

console = Console()


@click.group()
def fonts() -> None:
    """Font inspection commands."""
    pass


@fonts.command("info")
@click.argument("font_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--index", type=int, default=0, help="Face index inside a collection")
def font_info(font_file: Path, index: int) -> None:
    """Show units per em, glyph count and space advance of FONT_FILE."""
    try:
        face = FontFace.from_file(font_file, index)
    except FontLoadError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e

    ttfont = face.ttfont
    family = ttfont["name"].getBestFamilyName() if "name" in ttfont else None
    outline_format = "CFF" if "CFF " in ttfont or "CFF2" in ttfont else "TrueType"

    table = Table(title=font_file.name)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="yellow")
    table.add_row("Family", family or "Unknown")
    table.add_row("Face index", str(index))
    table.add_row("Outlines", outline_format)
    table.add_row("Units per em", str(face.units_per_em))
    table.add_row("Glyphs", str(len(ttfont.getGlyphOrder())))
    table.add_row("Space advance", str(face.space_advance))

    console.print(table)
