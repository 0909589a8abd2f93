"""CLI display and formatting functions."""

from __future__ import annotations

from ..grouping import STATE_IDLE, SearchView
from ..models import Artist, City, Event, SearchResult, Venue
from ..session import result_link
from .utils import plural


# Filter labels per locale
TYPE_LABELS = {
    "all": {"en": "All", "zh": "全部", "ja": "すべて"},
    "event": {"en": "Events", "zh": "活動", "ja": "イベント"},
    "artist": {"en": "Artists", "zh": "藝人", "ja": "アーティスト"},
    "venue": {"en": "Venues", "zh": "場地", "ja": "会場"},
    "city": {"en": "Cities", "zh": "城市", "ja": "都市"},
}

# Section headers for grouped results
SECTION_LABELS = {
    "event": {"en": "EVENTS", "zh": "活動", "ja": "イベント"},
    "artist": {"en": "ARTISTS", "zh": "藝人", "ja": "アーティスト"},
    "venue": {"en": "VENUES", "zh": "場地", "ja": "会場"},
    "city": {"en": "CITIES", "zh": "城市", "ja": "都市"},
}


def label(labels: dict[str, dict[str, str]], key: str, locale: str) -> str:
    """Localized label, falling back to English."""
    translations = labels[key]
    return translations.get(locale, translations["en"])


def _event_day(event: Event) -> str:
    """Short day label, e.g. 'Mar 14' from 'Mar 14, Fri'."""
    return event.date_display.split(",")[0] or event.date_display[:6]


def format_search_result(result: SearchResult, locale: str = "en", verbose: bool = False) -> str:
    """Format a search result for display."""
    lines = []
    record = result.data

    if isinstance(record, Event):
        lines.append(f"[event] {_event_day(record)} {record.title} (score: {result.score:.1f})")
        detail = record.venue_name
        if record.primary_artist_name:
            detail += f" · {record.primary_artist_name}"
        if record.time_display:
            detail += f" · {record.time_display}"
        lines.append(f"  {detail}")

    elif isinstance(record, Artist):
        lines.append(f"[artist] {record.display_name} (score: {result.score:.1f})")
        # Groups and big bands show their type, people their instrument
        if record.type and record.type != "person":
            detail = record.type
        else:
            detail = record.primary_instrument or ""
        if record.country_code:
            detail += f" · {record.country_code}"
        if detail:
            lines.append(f"  {detail}")

    elif isinstance(record, Venue):
        lines.append(f"[venue] {record.display_name} (score: {result.score:.1f})")
        if record.city_name:
            lines.append(f"  {record.city_name}")

    elif isinstance(record, City):
        lines.append(f"[city] {record.name} (score: {result.score:.1f})")
        lines.append(f"  {plural(record.venue_count, 'venue')}")

    if verbose:
        lines.append(f"  id: {result.id} | link: {result_link(result, locale)}")

    return "\n".join(lines)


def format_view(view: SearchView, locale: str = "en", verbose: bool = False) -> str:
    """Format a grouped or flat results view."""
    if view.state == STATE_IDLE:
        return "Type something to search events, artists, venues and cities."
    if view.results.is_empty:
        return f'No results for "{view.query.strip()}".'

    lines = []
    if view.results.grouped:
        for kind, items in view.results.groups.items():
            lines.append(f"=== {label(SECTION_LABELS, kind, locale)} ({len(items)}) ===")
            lines.append("")
            for result in items:
                lines.append(format_search_result(result, locale, verbose))
                lines.append("")
    else:
        lines.append(f"=== {label(TYPE_LABELS, view.filter, locale)} ({len(view.flat)}) ===")
        lines.append("")
        for result in view.flat:
            lines.append(format_search_result(result, locale, verbose))
            lines.append("")

    hidden = view.results.total - len(view.flat)
    if hidden > 0:
        lines.append(f"({plural(hidden, 'more result')} not shown)")

    return "\n".join(lines).rstrip()
