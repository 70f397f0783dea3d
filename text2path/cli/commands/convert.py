"""Convert command - render a string to SVG path data."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import click
from rich.console import Console

from text2path.api import TextRequest, text_to_path_data
from text2path.config import Config
from text2path.exceptions import FontLoadError, PathFormatError
from text2path.fonts import FontTable

console = Console(stderr=True)

FONT_KEY = "default"


@click.command()
@click.argument("text")
@click.option(
    "--font",
    "-f",
    "font_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
    help="Font file (TTF/OTF/TTC)",
)
@click.option("--index", type=int, default=0, help="Face index inside a collection")
@click.option("--size", "-s", type=float, default=64.0, help="Font size")
@click.option("--x", type=float, default=0.0, help="Origin X")
@click.option("--y", type=float, default=0.0, help="Origin Y (baseline)")
@click.option("--spacing", type=float, default=0.0, help="Letter spacing added after each run")
@click.option("--y-up", is_flag=True, help="Keep the font's upward Y axis (print space)")
@click.option("--cubic", is_flag=True, help="Elevate quadratic curves to cubic")
@click.option("-p", "--precision", type=click.IntRange(min=0), help="Digits after the decimal point")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Write path data to file")
@click.pass_context
def convert(
    ctx: click.Context,
    text: str,
    font_path: Path,
    index: int,
    size: float,
    x: float,
    y: float,
    spacing: float,
    y_up: bool,
    cubic: bool,
    precision: int | None,
    output: Path | None,
) -> None:
    """Convert TEXT to SVG path data."""
    config: Config = (ctx.obj or {}).get("config") or Config.load()
    if precision is not None:
        config = replace(config, precision=precision)

    fonts = FontTable()
    try:
        fonts.load(FONT_KEY, font_path, index)
    except FontLoadError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e

    request = TextRequest(
        text=text,
        font=FONT_KEY,
        font_size=size,
        x=x,
        y=y,
        letter_spacing=spacing,
        y_up=y_up,
    )
    try:
        data = text_to_path_data(request, fonts.freeze(), config, cubic=cubic)
    except PathFormatError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e

    if output:
        output.write_text(data or "", encoding="utf-8")
        console.print(f"[green]Wrote[/green] {output}")
    else:
        click.echo(data or "")
