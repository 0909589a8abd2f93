"""Command-line interface for jazz-search."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from ..config import Config, get_config
from .info import info
from .search import search


@click.group()
@click.version_option()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Config file (default: ~/.jazz-search/config.yaml)",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (default: from config)",
)
@click.pass_context
def main(ctx: click.Context, config_path: Optional[Path], log_level: Optional[str]):
    """Jazz Search - Ranked search over jazz events, artists, venues and cities.

    \b
      search  Search a data export
      info    Show record counts
    """
    try:
        config = Config.load(config_path) if config_path else get_config()
    except ValueError as e:
        click.echo(f"Invalid configuration: {e}", err=True)
        sys.exit(1)

    logging.basicConfig(
        level=(log_level or config.log_level).upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


# Register commands
main.add_command(search)
main.add_command(info)


if __name__ == "__main__":
    main()
