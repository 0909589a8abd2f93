"""Loading search collections from exported data files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Union

import yaml

from .models import SearchData

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".json", ".yaml", ".yml")


def load_search_data(path: Union[str, Path]) -> SearchData:
    """Load events, artists, venues and cities from a JSON or YAML file.

    The file holds a mapping with optional ``events``, ``artists``,
    ``venues`` and ``cities`` lists of record mappings.

    Args:
        path: Path to a .json, .yaml or .yml file.

    Returns:
        The loaded SearchData.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file type is unsupported or the content is malformed.
    """
    path = Path(path).expanduser()
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ValueError(
            f"Unsupported data file type: {path.name} (expected {', '.join(SUPPORTED_SUFFIXES)})"
        )

    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")

    with open(path, encoding="utf-8") as f:
        try:
            if suffix == ".json":
                raw = json.load(f)
            else:
                raw = yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ValueError(f"Could not parse {path.name}: {e}") from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path.name}: expected a mapping at the top level")

    data = SearchData.from_dict(raw)
    logger.info("Loaded %s: %s", path, data.counts())
    return data
