"""Search functionality for jazz-search.

Three layers, each a pure function of its inputs:

- ``match_score`` scores one query against one field value.
- ``scan_entities`` scores every record of one kind against its weighted fields.
- ``search`` runs the scan over the selected kinds and ranks the hits.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from .config import Config, get_config
from .models import FILTER_ALL, FILTERS, RESULT_TYPES, Record, SearchData, SearchResult

logger = logging.getLogger(__name__)


# --- Scoring Constants ---
#
# Match tiers are integer bands. A field's score is its tier times the
# field weight, and the first matching tier wins.

EXACT_SCORE = 100
PREFIX_SCORE = 80
SUBSTRING_SCORE = 60
FUZZY_SCORE = 30  # Query characters appear in order, not necessarily adjacent

# Field weights per entity kind, highest-signal field first.
# A record scores the max over its fields, never the sum.
EVENT_FIELD_WEIGHTS: tuple[tuple[str, float], ...] = (
    ("title", 1.5),
    ("primary_artist_name", 1.2),
    ("venue_name", 1.0),
    ("description_short", 0.5),
)

ARTIST_FIELD_WEIGHTS: tuple[tuple[str, float], ...] = (
    ("display_name", 1.5),
    ("primary_instrument", 0.8),
    ("bio", 0.4),
)

VENUE_FIELD_WEIGHTS: tuple[tuple[str, float], ...] = (
    ("display_name", 1.5),
    ("city_name", 1.0),
    ("address", 0.6),
)

CITY_FIELD_WEIGHTS: tuple[tuple[str, float], ...] = (
    ("name", 1.5),
    ("city_slug", 1.0),
)

FIELD_WEIGHTS = {
    "event": EVENT_FIELD_WEIGHTS,
    "artist": ARTIST_FIELD_WEIGHTS,
    "venue": VENUE_FIELD_WEIGHTS,
    "city": CITY_FIELD_WEIGHTS,
}


# --- Matcher ---


def _normalize_text(text: str) -> str:
    """Normalize text for matching: lowercase and strip."""
    return text.lower().strip()


def _is_subsequence(query: str, text: str) -> bool:
    """Check whether every character of query appears in text, in order."""
    qi = 0
    for ch in text:
        if qi == len(query):
            break
        if ch == query[qi]:
            qi += 1
    return qi == len(query)


def match_score(query: str, text: Optional[str]) -> int:
    """Score a single field value against a query.

    Tiers, first match wins:
    - Exact match: 100
    - Prefix match: 80
    - Substring match: 60
    - Subsequence (fuzzy) match: 30
    - No match: 0

    Args:
        query: Search query (normalized here, so raw input is fine).
        text: Field value; None or empty never matches.

    Returns:
        Tier score.
    """
    if not text:
        return 0
    q = _normalize_text(query)
    t = _normalize_text(text)

    if t == q:
        return EXACT_SCORE
    if t.startswith(q):
        return PREFIX_SCORE
    if q in t:
        return SUBSTRING_SCORE
    if _is_subsequence(q, t):
        return FUZZY_SCORE
    return 0


# --- Entity Scanner ---


def score_record(
    query: str,
    record: Record,
    weights: Sequence[tuple[str, float]],
) -> float:
    """Best weighted field score for a record (max, not sum)."""
    best = 0.0
    for field_name, weight in weights:
        score = match_score(query, getattr(record, field_name, None)) * weight
        if score > best:
            best = score
    return best


def scan_entities(
    query: str,
    records: Iterable[Record],
    weights: Sequence[tuple[str, float]],
) -> list[tuple[Record, float]]:
    """Score each record of one kind, keeping only positive scores.

    Args:
        query: Normalized search query.
        records: Records of a single kind.
        weights: (field, weight) table for that kind.

    Returns:
        (record, score) pairs in input order.
    """
    hits = []
    for record in records:
        score = score_record(query, record, weights)
        if score > 0:
            hits.append((record, score))
    return hits


# --- Aggregator ---


def normalize_filter(
    filter: str,
    strict: Optional[bool] = None,
    config: Optional[Config] = None,
) -> str:
    """Validate a type filter.

    An unknown filter is a caller bug. In strict mode it raises; otherwise
    it is logged and treated as 'all'.

    Args:
        filter: 'all' or an entity kind.
        strict: Raise on unknown filters. Defaults to config.search.strict_filters.
        config: Configuration consulted when strict is None.

    Returns:
        A valid filter value.

    Raises:
        ValueError: Unknown filter in strict mode.
    """
    if filter in FILTERS:
        return filter

    if strict is None:
        if config is None:
            config = get_config()
        strict = config.search.strict_filters

    if strict:
        raise ValueError(f"Unknown search filter: {filter!r} (expected one of {', '.join(FILTERS)})")

    logger.warning("Unknown search filter %r, searching all types", filter)
    return FILTER_ALL


def search(
    query: str,
    data: SearchData,
    filter: str = FILTER_ALL,
    *,
    strict: Optional[bool] = None,
    config: Optional[Config] = None,
) -> list[SearchResult]:
    """Search events, artists, venues and cities.

    Results from every selected kind are merged and sorted by score,
    highest first. The sort is stable, so equal scores keep scan order:
    events, then artists, venues, cities. Nothing is truncated here.

    Args:
        query: Free-text query. Blank queries return no results.
        data: The four collections to search.
        filter: 'all' or a single entity kind.
        strict: Raise ValueError on an unknown filter (see normalize_filter).
        config: Configuration consulted for strict mode.

    Returns:
        Ranked results, possibly empty.
    """
    q = _normalize_text(query)
    if not q:
        return []

    filter = normalize_filter(filter, strict=strict, config=config)
    kinds = RESULT_TYPES if filter == FILTER_ALL else (filter,)

    results: list[SearchResult] = []
    for kind in kinds:
        for record, score in scan_entities(q, data.records(kind), FIELD_WEIGHTS[kind]):
            results.append(SearchResult(type=kind, id=record.id, score=score, data=record))

    results.sort(key=lambda r: r.score, reverse=True)

    logger.debug("search %r (filter=%s): %d results", q, filter, len(results))
    return results
