"""Test helper utilities.

This module provides helper functions for writing tests, including:
- Factory helpers for creating records
- Assertion helpers for checking ranked results
"""

from __future__ import annotations

from typing import Any, Optional

from jazz_search.models import Artist, City, Event, SearchResult, Venue


# -----------------------------------------------------------------------------
# Factory Helpers
# -----------------------------------------------------------------------------


def make_event(id: str, title: str, **fields: Any) -> Event:
    """Create an event with sensible defaults for unspecified fields."""
    fields.setdefault("venue_name", "")
    fields.setdefault("date_display", "")
    fields.setdefault("time_display", "")
    return Event(id=id, title=title, **fields)


def make_artist(id: str, display_name: str, **fields: Any) -> Artist:
    """Create an artist."""
    return Artist(id=id, display_name=display_name, **fields)


def make_venue(id: str, display_name: str, city_name: str = "", **fields: Any) -> Venue:
    """Create a venue."""
    return Venue(id=id, display_name=display_name, city_name=city_name, **fields)


def make_city(id: str, name: str, city_slug: Optional[str] = None, venue_count: int = 0) -> City:
    """Create a city. The slug defaults to the lowercased name."""
    return City(id=id, city_slug=city_slug or name.lower(), name=name, venue_count=venue_count)


# -----------------------------------------------------------------------------
# Assertion Helpers
# -----------------------------------------------------------------------------


def result_keys(results: list[SearchResult]) -> list[tuple[str, str]]:
    """(type, id) pairs in result order."""
    return [r.key for r in results]


def assert_sorted_by_score(results: list[SearchResult]) -> None:
    """Assert results are in non-increasing score order."""
    scores = [r.score for r in results]
    assert scores == sorted(scores, reverse=True), f"Not sorted by score: {scores}"
