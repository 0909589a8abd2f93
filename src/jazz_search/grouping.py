"""Grouping and capping of ranked results for display."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .config import Config, get_config
from .models import FILTER_ALL, RESULT_TYPES, SearchData, SearchResult
from .search import _normalize_text, normalize_filter, search

# View states
STATE_IDLE = "idle"  # No query typed yet
STATE_EMPTY = "empty"  # Query typed, nothing matched
STATE_RESULTS = "results"


@dataclass
class GroupedResults:
    """Capped results, grouped by kind when no type filter is active.

    ``flat`` is the list keyboard navigation indexes into. When grouped it
    is the groups concatenated in kind order.
    """
    flat: list[SearchResult]
    groups: dict[str, list[SearchResult]] = field(default_factory=dict)
    total: int = 0  # Uncapped result count
    filter: str = FILTER_ALL

    @property
    def grouped(self) -> bool:
        """Whether results are shown per kind."""
        return self.filter == FILTER_ALL

    @property
    def is_empty(self) -> bool:
        return not self.flat

    def section_start(self, kind: str) -> Optional[int]:
        """Flat index of the first item in a kind's group, or None."""
        index = 0
        for group_kind, items in self.groups.items():
            if group_kind == kind:
                return index
            index += len(items)
        return None


def group_results(
    results: list[SearchResult],
    filter: str = FILTER_ALL,
    group_limit: Optional[int] = None,
    flat_limit: Optional[int] = None,
    config: Optional[Config] = None,
) -> GroupedResults:
    """Partition and cap ranked results.

    With filter 'all', results are split by kind keeping their ranked
    order, each group is capped at group_limit, and the flat list is the
    groups in event, artist, venue, city order. With a single-kind filter
    the ranked list is capped at flat_limit and not grouped.

    Args:
        results: Output of search(), already sorted.
        filter: The filter the results were produced with.
        group_limit: Max items per kind. Defaults to config.search.group_limit.
        flat_limit: Max items for a single kind. Defaults to config.search.flat_limit.
        config: Configuration for default limits.

    Returns:
        GroupedResults.
    """
    filter = normalize_filter(filter, config=config)

    if group_limit is None or flat_limit is None:
        if config is None:
            config = get_config()
        if group_limit is None:
            group_limit = config.search.group_limit
        if flat_limit is None:
            flat_limit = config.search.flat_limit

    if filter != FILTER_ALL:
        return GroupedResults(
            flat=results[:flat_limit],
            total=len(results),
            filter=filter,
        )

    partitions: dict[str, list[SearchResult]] = {kind: [] for kind in RESULT_TYPES}
    for result in results:
        partitions[result.type].append(result)

    groups = {
        kind: items[:group_limit]
        for kind, items in partitions.items()
        if items
    }
    flat = [result for items in groups.values() for result in items]

    return GroupedResults(flat=flat, groups=groups, total=len(results), filter=filter)


@dataclass
class SearchView:
    """Everything a results panel needs for one query/filter pair."""
    query: str
    filter: str
    results: GroupedResults

    @property
    def state(self) -> str:
        """'idle' before anything is typed, 'empty' on no match, else 'results'.

        Derived from the query string, not from the result count alone.
        """
        if not _normalize_text(self.query):
            return STATE_IDLE
        if self.results.is_empty:
            return STATE_EMPTY
        return STATE_RESULTS

    @property
    def flat(self) -> list[SearchResult]:
        return self.results.flat


def search_view(
    query: str,
    data: SearchData,
    filter: str = FILTER_ALL,
    config: Optional[Config] = None,
) -> SearchView:
    """Run a search and group the results for display."""
    if config is None:
        config = get_config()
    filter = normalize_filter(filter, config=config)
    results = search(query, data, filter, config=config)
    return SearchView(
        query=query,
        filter=filter,
        results=group_results(results, filter, config=config),
    )
