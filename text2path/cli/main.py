"""text2path command group."""

from __future__ import annotations

from pathlib import Path

import click

from text2path import __version__
from text2path.cli.commands import convert, fonts, runs
from text2path.config import Config
from text2path.exceptions import ConfigError
from text2path.log import setup_logging


@click.group()
@click.version_option(__version__, prog_name="text2path")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML config file",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Override the configured log level",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, log_level: str | None) -> None:
    """Convert text to vector path outlines."""
    try:
        config = Config.load(config_path)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e
    if log_level:
        config.log_level = log_level.upper()
    setup_logging(config.log_level)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["log_level"] = config.log_level


cli.add_command(convert)
cli.add_command(runs)
cli.add_command(fonts)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
