"""Info CLI command for data statistics."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import click

from ..config import Config
from ..models import RESULT_TYPES
from .display import TYPE_LABELS, label
from .utils import load_data


@click.command("info")
@click.option("--data", "data_path", type=click.Path(dir_okay=False, path_type=Path), help="JSON or YAML data export")
@click.option("--json", "json_output", is_flag=True, help="Machine-readable JSON output")
@click.pass_obj
def info(config: Config, data_path: Optional[Path], json_output: bool):
    """Show how many records of each type the data holds."""
    data = load_data(data_path, config)
    counts = data.counts()

    if json_output:
        click.echo(json.dumps({"counts": counts, "total": sum(counts.values())}, indent=2))
        return

    click.echo("Records:")
    for kind in RESULT_TYPES:
        click.echo(f"  {label(TYPE_LABELS, kind, config.locale)}: {counts[kind]}")
    click.echo(f"  Total: {sum(counts.values())}")
