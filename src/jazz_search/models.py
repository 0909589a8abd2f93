"""Record and result types for jazz-search."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union


# Entity kinds, in the enumeration order used for scanning, grouping and ties
RESULT_TYPES = ("event", "artist", "venue", "city")
FILTER_ALL = "all"
FILTERS = (FILTER_ALL,) + RESULT_TYPES

# Collection attribute on SearchData for each kind
COLLECTIONS = {
    "event": "events",
    "artist": "artists",
    "venue": "venues",
    "city": "cities",
}


@dataclass(frozen=True)
class Event:
    """A scheduled performance at a venue."""
    id: str
    title: str
    venue_name: str = ""
    start_at: Optional[str] = None  # ISO timestamp
    primary_artist_name: Optional[str] = None
    description_short: Optional[str] = None
    date_display: str = ""
    time_display: str = ""


@dataclass(frozen=True)
class Artist:
    """A performer: a person, a group, or a big band."""
    id: str
    display_name: str
    type: Optional[str] = None  # 'person', 'group', 'big band'
    primary_instrument: Optional[str] = None
    country_code: Optional[str] = None
    bio: Optional[str] = None
    photo_url: Optional[str] = None


@dataclass(frozen=True)
class Venue:
    """A place that hosts jazz."""
    id: str
    display_name: str
    city_name: str = ""
    address: Optional[str] = None
    jazz_frequency: Optional[str] = None


@dataclass(frozen=True)
class City:
    """A city with at least one listed venue."""
    id: str
    city_slug: str
    name: str
    venue_count: int = 0


Record = Union[Event, Artist, Venue, City]


# Accepted source keys per field. The site's exports use camelCase for some
# fields; the first key present wins.
_FIELD_KEYS: dict[type, dict[str, tuple[str, ...]]] = {
    Event: {
        "id": ("id",),
        "title": ("title",),
        "venue_name": ("venue_name", "venueName"),
        "start_at": ("start_at", "startAt"),
        "primary_artist_name": ("primary_artist_name", "primaryArtistName"),
        "description_short": ("description_short", "descriptionShort"),
        "date_display": ("date_display", "dateDisplay"),
        "time_display": ("time_display", "timeDisplay"),
    },
    Artist: {
        "id": ("id",),
        "display_name": ("display_name", "displayName"),
        "type": ("type",),
        "primary_instrument": ("primary_instrument", "primaryInstrument"),
        "country_code": ("country_code", "countryCode"),
        "bio": ("bio",),
        "photo_url": ("photo_url", "photoUrl"),
    },
    Venue: {
        "id": ("id",),
        "display_name": ("display_name", "displayName"),
        "city_name": ("city_name", "cityName"),
        "address": ("address",),
        "jazz_frequency": ("jazz_frequency", "jazzFrequency"),
    },
    City: {
        "id": ("id",),
        "city_slug": ("city_slug", "citySlug"),
        "name": ("name",),
        "venue_count": ("venue_count", "venueCount"),
    },
}

# Fields a record cannot be built without
_REQUIRED: dict[type, tuple[str, ...]] = {
    Event: ("id", "title"),
    Artist: ("id", "display_name"),
    Venue: ("id", "display_name"),
    City: ("id", "city_slug", "name"),
}

_RECORD_CLASSES: dict[str, type] = {
    "event": Event,
    "artist": Artist,
    "venue": Venue,
    "city": City,
}


def record_from_dict(kind: str, raw: Mapping[str, Any], index: int = 0) -> Record:
    """Build a record of the given kind from a plain mapping.

    Args:
        kind: Entity kind ('event', 'artist', 'venue' or 'city').
        raw: Source mapping, snake_case or camelCase keys.
        index: Position in the source collection, used in error messages.

    Returns:
        The frozen record.

    Raises:
        ValueError: If the kind is unknown, the value is not a mapping,
            or a required field is missing.
    """
    cls = _RECORD_CLASSES.get(kind)
    if cls is None:
        raise ValueError(f"Unknown entity kind: {kind}")
    if not isinstance(raw, Mapping):
        raise ValueError(f"{kind} #{index}: expected a mapping, got {type(raw).__name__}")

    values: dict[str, Any] = {}
    for name, keys in _FIELD_KEYS[cls].items():
        for key in keys:
            if key in raw:
                values[name] = raw[key]
                break

    for name in _REQUIRED[cls]:
        if values.get(name) in (None, ""):
            raise ValueError(f"{kind} #{index}: missing required field '{name}'")

    for name, value in values.items():
        if value is None or isinstance(value, str) or name == "venue_count":
            continue
        # Numeric titles and names ("1999", "2046") are plain text
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            values[name] = str(value)
        else:
            raise ValueError(
                f"{kind} #{index}: '{name}' must be a string, got {type(value).__name__}"
            )

    if cls is City:
        try:
            values["venue_count"] = int(values.get("venue_count") or 0)
        except (TypeError, ValueError):
            raise ValueError(
                f"city #{index}: venue_count must be an integer, got {values.get('venue_count')!r}"
            ) from None

    return cls(**values)


@dataclass
class SearchData:
    """The four collections a search runs over.

    Collections are read, never modified.
    """
    events: list[Event] = field(default_factory=list)
    artists: list[Artist] = field(default_factory=list)
    venues: list[Venue] = field(default_factory=list)
    cities: list[City] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SearchData":
        """Build SearchData from a mapping of collection name to record dicts."""
        collections = {}
        for kind, attr in COLLECTIONS.items():
            raw_records = data.get(attr) or []
            if not isinstance(raw_records, list):
                raise ValueError(f"'{attr}' must be a list, got {type(raw_records).__name__}")
            collections[attr] = [
                record_from_dict(kind, raw, index)
                for index, raw in enumerate(raw_records)
            ]
        return cls(**collections)

    def records(self, kind: str) -> list[Record]:
        """Return the collection for an entity kind."""
        return getattr(self, COLLECTIONS[kind])

    def counts(self) -> dict[str, int]:
        """Number of records per kind."""
        return {kind: len(self.records(kind)) for kind in RESULT_TYPES}


@dataclass(frozen=True)
class SearchResult:
    """A scored hit, tagged with its entity kind.

    ``data`` is the caller's record object itself, not a copy.
    """
    type: str
    id: str
    score: float
    data: Record

    def __post_init__(self):
        if self.type not in RESULT_TYPES:
            raise ValueError(f"Invalid result type: {self.type}")

    @property
    def key(self) -> tuple[str, str]:
        """Identity of the result; ids are only unique within a kind."""
        return (self.type, self.id)
