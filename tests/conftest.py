"""Centralized pytest fixtures and configuration.

This module provides shared fixtures for all tests, including:
- Configuration isolated from the user's home directory
- A small jazz listings data set
- Data export files in JSON and YAML
"""

from __future__ import annotations

import json
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
import yaml

from jazz_search import config as config_module
from jazz_search.config import Config, SearchConfig
from jazz_search.models import SearchData

from helpers import make_artist, make_city, make_event, make_venue

if TYPE_CHECKING:
    from collections.abc import Generator


# -----------------------------------------------------------------------------
# Configuration Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    The directory is automatically cleaned up after the test.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def isolated_config(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Point the global config at an empty temp location.

    Keeps a real ~/.jazz-search/config.yaml from leaking into tests.
    """
    monkeypatch.setenv(config_module.CONFIG_PATH_ENV, str(temp_dir / "config.yaml"))
    monkeypatch.setattr(config_module, "_config", None)
    yield
    config_module._config = None


@pytest.fixture
def temp_config() -> Config:
    """Default configuration: groups of 4, flat lists of 20, lenient filters."""
    return Config(search=SearchConfig())


@pytest.fixture
def strict_config() -> Config:
    """Configuration that raises on unknown filters."""
    return Config(search=SearchConfig(strict_filters=True))


# -----------------------------------------------------------------------------
# Data Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def sample_data() -> SearchData:
    """A small listings data set spanning all four kinds."""
    return SearchData(
        events=[
            make_event(
                "e1",
                "Blue Note Jam",
                venue_name="Blue Note Taipei",
                primary_artist_name="Lin Trio",
                description_short="Open jam session every Tuesday",
                date_display="Mar 14, Fri",
                time_display="21:00",
            ),
            make_event(
                "e2",
                "Coltrane Tribute Night",
                venue_name="Sappho Live",
                primary_artist_name="John Coltrane Project",
            ),
        ],
        artists=[
            make_artist("a1", "John Coltrane", primary_instrument="saxophone", country_code="US", type="person"),
            make_artist("a2", "Taipei Jazz Orchestra", type="big band", country_code="TW"),
            make_artist("a3", "Mei Chen", primary_instrument="piano", bio="Plays at Blue Note most weekends"),
        ],
        venues=[
            make_venue("v1", "Blue Note Taipei", city_name="Taipei", address="No. 171, Roosevelt Rd"),
            make_venue("v2", "Sappho Live", city_name="Taipei"),
        ],
        cities=[
            make_city("c1", "Taipei", "tw-tpe", venue_count=2),
            make_city("c2", "Tokyo", "jp-tyo", venue_count=0),
        ],
    )


@pytest.fixture
def sample_records() -> dict:
    """Raw export records as the site publishes them (camelCase keys)."""
    return {
        "events": [
            {
                "id": "e1",
                "title": "Blue Note Jam",
                "start_at": "2026-03-14T13:00:00Z",
                "venue_name": "Blue Note Taipei",
                "primary_artist_name": "Lin Trio",
                "description_short": None,
                "date_display": "Mar 14, Fri",
                "time_display": "21:00",
            },
        ],
        "artists": [
            {
                "id": "a1",
                "displayName": "John Coltrane",
                "type": "person",
                "primaryInstrument": "saxophone",
                "countryCode": "US",
                "bio": None,
                "photoUrl": None,
            },
        ],
        "venues": [
            {
                "id": "v1",
                "displayName": "Blue Note Taipei",
                "cityName": "Taipei",
                "address": None,
                "jazz_frequency": "nightly",
            },
        ],
        "cities": [
            {"id": "c1", "citySlug": "tw-tpe", "name": "Taipei", "venueCount": "2"},
        ],
    }


@pytest.fixture
def json_data_file(temp_dir: Path, sample_records: dict) -> Path:
    """Sample records written as JSON."""
    path = temp_dir / "data.json"
    path.write_text(json.dumps(sample_records), encoding="utf-8")
    return path


@pytest.fixture
def yaml_data_file(temp_dir: Path, sample_records: dict) -> Path:
    """Sample records written as YAML."""
    path = temp_dir / "data.yaml"
    path.write_text(yaml.safe_dump(sample_records), encoding="utf-8")
    return path
