"""Jazz Search - Ranked fuzzy search over jazz events, artists, venues and cities."""

from importlib.metadata import version, PackageNotFoundError

_pkg = __package__.split('.')[0]

try:
    __version__: str = version(_pkg)
except PackageNotFoundError:
    __version__: str = "0.0.1-dev"  # fallback for running directly from source

from .models import (
    # Records
    Event,
    Artist,
    Venue,
    City,
    SearchData,
    # Results
    SearchResult,
    RESULT_TYPES,
    FILTERS,
)
from .search import match_score, search
from .grouping import GroupedResults, SearchView, group_results, search_view
from .session import SearchSession, result_link
from .data import load_search_data

__all__ = [
    # Records
    "Event",
    "Artist",
    "Venue",
    "City",
    "SearchData",
    # Results
    "SearchResult",
    "RESULT_TYPES",
    "FILTERS",
    # Search
    "match_score",
    "search",
    "GroupedResults",
    "SearchView",
    "group_results",
    "search_view",
    "SearchSession",
    "result_link",
    "load_search_data",
]
