"""Item normalization.

Converts one raw provider item (song, album, artist, playlist, suggestion)
into a NormalizedItem. Providers change field names between versions and
between endpoints, so every field is resolved from an ordered list of
candidate names and nothing is assumed about value shapes.

normalize_item() never raises: a failure degrades the item instead of
aborting the batch it belongs to.
"""

import logging
from collections.abc import Mapping
from typing import Any

from ytmproxy.exceptions import NormalizationFailure
from ytmproxy.models.enums import ItemType
from ytmproxy.models.item import NormalizedItem
from ytmproxy.utils.coercion import (
    as_text,
    coerce_to_list,
    extract_display_name,
    first_present,
    parse_duration,
)
from ytmproxy.utils.url import video_id_from_url

logger = logging.getLogger(__name__)

TITLE_FIELDS = ("title", "name", "subtitle")
ID_FIELDS = ("videoId", "entityId", "browseId", "id", "video_id")
ARTIST_FIELDS = ("artists", "artist", "subtitles")
THUMBNAIL_FIELDS = ("thumbnail", "thumbs")
DURATION_FIELDS = ("duration", "length", "duration_seconds")
VIDEO_ID_FIELDS = ("videoId", "id")
TYPE_FIELDS = ("type", "resultType")

SUGGESTION_TITLE_FIELDS = ("title", "query", "name", "suggestion", "term", "text")
SUGGESTION_TYPE_FIELDS = ("type", "category", "suggestionType")

# Minimum length for a bare string field to be taken as lyrics text
_LYRICS_MIN_LENGTH = 20


def infer_item_type(raw: Mapping[str, Any]) -> ItemType:
    """Guess an item's type from the fields it carries."""
    if raw.get("videoId"):
        return ItemType.SONG
    subtitle = raw.get("subtitle")
    if (
        raw.get("browseId")
        and raw.get("title")
        and subtitle
        and raw.get("thumbnail")
        and isinstance(subtitle, str)
    ):
        lowered = subtitle.lower()
        if "song" in lowered or "track" in lowered:
            return ItemType.ALBUM
    return ItemType.OTHER


def _resolve_type(raw: Mapping[str, Any], type_hint: str | None) -> ItemType:
    hinted = ItemType.coerce(type_hint)
    if hinted is not None:
        return hinted
    labelled = ItemType.coerce(first_present(raw, TYPE_FIELDS))
    if labelled is not None:
        return labelled
    return infer_item_type(raw)


def _resolve_thumbnails(raw: Mapping[str, Any]) -> list[Any]:
    thumbnails = raw.get("thumbnails")
    if isinstance(thumbnails, list):
        return thumbnails
    single = first_present(raw, THUMBNAIL_FIELDS)
    if single is None:
        return []
    return single if isinstance(single, list) else [single]


def _resolve_duration(raw: Mapping[str, Any]) -> int | float | None:
    for name in DURATION_FIELDS:
        seconds = parse_duration(raw.get(name))
        if seconds:
            return seconds
    return None


def _resolve_video_id(raw: Mapping[str, Any]) -> str | None:
    value = as_text(first_present(raw, VIDEO_ID_FIELDS))
    if value:
        return value
    return video_id_from_url(raw.get("url"))


def _normalize_strict(raw: Any, type_hint: str | None) -> NormalizedItem:
    if not isinstance(raw, Mapping):
        raise NormalizationFailure(
            f"expected a record, got {type(raw).__name__}"
        )

    artists = [
        name
        for entry in coerce_to_list(first_present(raw, ARTIST_FIELDS))
        if (name := extract_display_name(entry))
    ]

    return NormalizedItem(
        type=_resolve_type(raw, type_hint),
        id=as_text(first_present(raw, ID_FIELDS)) or "",
        title=as_text(first_present(raw, TITLE_FIELDS)) or "",
        artists=artists,
        thumbnails=_resolve_thumbnails(raw),
        duration=_resolve_duration(raw),
        video_id=_resolve_video_id(raw),
        raw=raw,
    )


def _degraded(raw: Any, type_hint: str | None, reason: str) -> NormalizedItem:
    """Build a best-effort item from directly present fields only."""
    fields: Mapping[str, Any] = raw if isinstance(raw, Mapping) else {}
    item_type = (
        ItemType.coerce(type_hint)
        or ItemType.coerce(fields.get("type"))
        or ItemType.UNKNOWN
    )

    def text(*names: str) -> str | None:
        for name in names:
            value = fields.get(name)
            if isinstance(value, str) and value:
                return value
        return None

    return NormalizedItem(
        type=item_type,
        id=text("videoId", "id", "entityId") or "",
        title=text("title", "name") or "",
        video_id=text("videoId", "id"),
        raw=raw,
        warning=f"normalize failed: {reason}",
    )


def normalize_item(raw: Any, type_hint: str | None = None) -> NormalizedItem:
    """Normalize one raw provider item.

    Args:
        raw: Untyped item as returned by the provider.
        type_hint: Optional type label that overrides any type on the item
            (e.g. derived from the bucket the item came from).

    Returns:
        A NormalizedItem. When normalization fails, a degraded item with
        ``warning`` set is returned instead.
    """
    try:
        return _normalize_strict(raw, type_hint)
    except Exception as e:
        logger.debug("Degrading unnormalizable item (%s): %r", e, raw)
        try:
            return _degraded(raw, type_hint, str(e))
        except Exception:
            logger.debug("Degraded normalization failed", exc_info=True)
            return NormalizedItem(raw=raw, warning=f"normalize failed: {e}")


def normalize_suggestion(raw: Any) -> NormalizedItem:
    """Normalize one search suggestion.

    Providers return suggestions either as plain strings or as records with
    a text-like field.
    """
    if isinstance(raw, str):
        return NormalizedItem(type=ItemType.SUGGESTION, title=raw, raw=raw)
    try:
        if not isinstance(raw, Mapping):
            raise NormalizationFailure(
                f"expected a string or record, got {type(raw).__name__}"
            )
        item_type = ItemType.coerce(first_present(raw, SUGGESTION_TYPE_FIELDS))
        if item_type is None:
            item_type = ItemType.SONG if raw.get("videoId") else ItemType.SUGGESTION
        title = as_text(first_present(raw, SUGGESTION_TITLE_FIELDS)) or ""
        return normalize_item(raw, item_type).model_copy(update={"title": title})
    except Exception as e:
        logger.debug("Degrading unnormalizable suggestion (%s): %r", e, raw)
        return NormalizedItem(
            type=ItemType.UNKNOWN,
            raw=raw,
            warning=f"normalize suggestion failed: {e}",
        )


def extract_lyrics_text(raw: Any) -> str | None:
    """Find lyrics text in a provider lyrics payload of unknown shape.

    Tries a ``lyrics`` field, then a string ``content`` field, then the payload
    itself if it is a string, then the first string value long enough to be
    lyrics rather than a label.
    """
    if isinstance(raw, str):
        return raw or None
    if not isinstance(raw, Mapping):
        return None
    lyrics = raw.get("lyrics")
    if isinstance(lyrics, str) and lyrics:
        return lyrics
    content = raw.get("content")
    if isinstance(content, str) and content:
        return content
    for value in raw.values():
        if isinstance(value, str) and len(value) > _LYRICS_MIN_LENGTH:
            return value
    return None
