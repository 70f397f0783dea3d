"""Runs command - show the bidi visual runs of a string."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from text2path.shaping.bidi import detect_base_direction, get_visual_runs

console = Console()


@click.command()
@click.argument("text")
def runs(text: str) -> None:
    """Show TEXT split into directional runs, in display order."""
    visual_runs = get_visual_runs(text)
    if not visual_runs:
        console.print("[yellow]No runs[/yellow]")
        return

    table = Table(title=f"Visual runs (base {detect_base_direction(text)})")
    table.add_column("#", style="dim")
    table.add_column("Range", style="cyan")
    table.add_column("Level", style="yellow")
    table.add_column("Direction", style="green")
    table.add_column("Text")

    for i, run in enumerate(visual_runs):
        table.add_row(
            str(i),
            f"{run.start}:{run.end}",
            str(run.level),
            run.direction,
            text[run.start:run.end],
        )

    console.print(table)
