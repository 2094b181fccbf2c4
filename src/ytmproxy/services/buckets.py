"""Result bucket extraction.

Finds the item collections embedded in a raw search/browse response and
normalizes them. Known bucket fields are scanned first; only when none of
them yields anything is every list-valued field flattened blindly, which is
what keeps the adapter working when the provider renames its buckets.
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from ytmproxy.models.item import NormalizedItem
from ytmproxy.services.normalizer import normalize_item, normalize_suggestion

logger = logging.getLogger(__name__)

TypeHintResolver = Callable[[str], str | None]

DEFAULT_BUCKETS = (
    "songs",
    "albums",
    "videos",
    "artists",
    "playlists",
    "singles",
    "tracks",
    "results",
    "items",
    "content",
    "contents",
    "charts",
)

# Fields holding the actual list when a bucket is a wrapper record
NESTED_LIST_FIELDS = ("results", "contents", "items")

SUGGESTION_BUCKETS = ("suggestions", "results", "items")

# Per-endpoint bucket orders
ALBUM_BUCKETS = ("tracks", "songs", "content", "contents")
ARTIST_BUCKETS = ("songs", "videos", "albums", "singles", "playlists")
PLAYLIST_BUCKETS = ("tracks", "songs", "items", "contents")
RECOMMENDATION_BUCKETS = ("recommended", "tracks", "items", "results")
TRENDING_BUCKETS = (
    "items",
    "results",
    "tracks",
    "songs",
    "videos",
    "content",
    "charts",
)


def song_type_hint(_: str) -> str:
    """Type hint for buckets that only ever hold tracks."""
    return "song"


def bucket_type_hint(bucket: str) -> str | None:
    """Derive a type hint from a bucket field name (substring match)."""
    name = bucket.lower()
    if "song" in name or "video" in name or "track" in name:
        return "song"
    if "album" in name or "single" in name:
        return "album"
    if "artist" in name:
        return "artist"
    if "playlist" in name:
        return "playlist"
    return None


def resolve_bucket(value: Any) -> list[Any] | None:
    """Resolve a bucket's content to a list, or None if it holds none."""
    if isinstance(value, list):
        return value
    if isinstance(value, Mapping):
        for name in NESTED_LIST_FIELDS:
            nested = value.get(name)
            if isinstance(nested, list):
                return nested
    return None


def extract_items(
    raw: Any,
    type_hint_resolver: TypeHintResolver = bucket_type_hint,
    buckets: Iterable[str] = DEFAULT_BUCKETS,
) -> list[NormalizedItem]:
    """Extract and normalize every item in a raw provider response.

    Args:
        raw: Response of unknown shape.
        type_hint_resolver: Maps a bucket field name to a type hint.
        buckets: Known bucket field names, scanned in order.

    Returns:
        Normalized items in bucket order, then element order. Empty if the
        response holds no lists at all.
    """
    if isinstance(raw, list):
        return [normalize_item(element) for element in raw]
    if not isinstance(raw, Mapping):
        logger.debug("Response is not a collection: %s", type(raw).__name__)
        return []

    items: list[NormalizedItem] = []
    for bucket in buckets:
        elements = resolve_bucket(raw.get(bucket))
        if not elements:
            continue
        hint = type_hint_resolver(bucket)
        items.extend(normalize_item(element, hint) for element in elements)

    if items:
        return items

    flattened = flatten_lists(raw)
    if flattened:
        logger.debug(
            "No known bucket in response (keys: %s); flattened %d elements",
            list(raw.keys()),
            len(flattened),
        )
    return [normalize_item(element) for element in flattened]


def flatten_lists(raw: Mapping[str, Any]) -> list[Any]:
    """Concatenate every list-valued field of a record, in field order."""
    elements: list[Any] = []
    for value in raw.values():
        if isinstance(value, list):
            elements.extend(value)
    return elements


def extract_suggestions(raw: Any) -> list[NormalizedItem]:
    """Extract and normalize autocomplete suggestions.

    Accepts a plain list, or a record holding the list under one of the
    suggestion bucket fields. A record with none of those fields has all of
    its list-valued fields flattened instead.
    """
    entries: list[Any] | None = raw if isinstance(raw, list) else None
    if isinstance(raw, Mapping):
        for bucket in SUGGESTION_BUCKETS:
            entries = resolve_bucket(raw.get(bucket))
            if entries:
                break
        else:
            entries = flatten_lists(raw)
            if entries:
                logger.debug(
                    "No suggestion bucket in response (keys: %s); flattened %d",
                    list(raw.keys()),
                    len(entries),
                )
    return [normalize_suggestion(entry) for entry in entries or []]
