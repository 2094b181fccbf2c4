"""Search filter resolution shared by the API and the CLI."""

from ytmproxy.exceptions import ValidationError

# Filters understood by ytmusicapi search
SEARCH_FILTERS = frozenset(
    {
        "songs",
        "videos",
        "albums",
        "artists",
        "playlists",
        "community_playlists",
        "featured_playlists",
        "uploads",
        "podcasts",
        "episodes",
        "profiles",
    }
)


def resolve_search_filter(value: str | None) -> str | None:
    """Map a search ``type`` parameter onto a provider filter.

    Singular forms are accepted ("song" for "songs").

    Raises:
        ValidationError: If the value names no known filter.
    """
    if value is None:
        return None
    name = value.strip().lower()
    if not name:
        return None
    if name not in SEARCH_FILTERS and f"{name}s" in SEARCH_FILTERS:
        name = f"{name}s"
    if name not in SEARCH_FILTERS:
        raise ValidationError(
            f"Unsupported search type: {value}",
            details=f"expected one of: {', '.join(sorted(SEARCH_FILTERS))}",
        )
    return name
