"""CLI utility functions."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click

from ..config import Config
from ..data import load_search_data
from ..models import SearchData


def resolve_data_path(data_path: Optional[Path], config: Config) -> Path:
    """Pick the data file from --data or the configured data_path."""
    if data_path:
        return data_path
    if config.data_path:
        return config.data_path
    click.echo("No data file given. Use --data or set data_path in the config.", err=True)
    sys.exit(1)


def load_data(data_path: Optional[Path], config: Config) -> SearchData:
    """Load search data, exiting with a message on failure."""
    path = resolve_data_path(data_path, config)
    try:
        return load_search_data(path)
    except (FileNotFoundError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def plural(count: int, word: str, plural_word: Optional[str] = None) -> str:
    """Format a count with a singular or plural noun."""
    if count == 1:
        return f"{count} {word}"
    return f"{count} {plural_word or word + 's'}"
