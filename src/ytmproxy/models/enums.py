"""Enum types for ytmproxy."""

from enum import StrEnum

# Provider labels that map onto a canonical item type
_TYPE_ALIASES = {
    "track": "song",
    "single": "album",
    "ep": "album",
    "channel": "artist",
}


class ItemType(StrEnum):
    """Canonical type of a normalized item."""

    SONG = "song"
    ALBUM = "album"
    ARTIST = "artist"
    PLAYLIST = "playlist"
    VIDEO = "video"
    SUGGESTION = "suggestion"
    OTHER = "other"
    UNKNOWN = "unknown"

    @classmethod
    def coerce(cls, value: object) -> "ItemType | None":
        """Map a provider type label onto the enum.

        Returns None for empty or non-string labels. Non-empty labels that are
        not recognized (podcast, episode, profile, ...) map to OTHER.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str) or not value.strip():
            return None
        label = value.strip().lower()
        label = _TYPE_ALIASES.get(label, label)
        try:
            return cls(label)
        except ValueError:
            return cls.OTHER
