"""URL parsing and building utilities."""

import re

WATCH_URL = "https://www.youtube.com/watch?v={video_id}"
EMBED_URL = "https://www.youtube.com/embed/{video_id}"

# Patterns used on arbitrary item URLs (no host check)
_ITEM_URL_PATTERNS = (
    re.compile(r"[?&]v=([^&#]+)"),
    re.compile(r"/watch/([^?&/#]+)"),
    re.compile(r"/embed/([^?&/#]+)"),
)

# Patterns used on user input that looks like a YouTube URL
_INPUT_URL_PATTERNS = (
    re.compile(r"[?&]v=([^&#]+)"),
    re.compile(r"youtu\.be/([^?&/#]+)"),
    re.compile(r"/embed/([^?&/#]+)"),
    re.compile(r"/watch/([^?&/#]+)"),
    re.compile(r"/shorts/([^?&/#]+)"),
)

_BARE_ID_PATTERN = re.compile(r"[A-Za-z0-9_-]{8,}")

# Maximum URL length to prevent potential abuse (standard browser limit)
MAX_URL_LENGTH = 2048


def watch_url(video_id: str) -> str:
    """Build the canonical watch URL for a video ID."""
    return WATCH_URL.format(video_id=video_id)


def embed_url(video_id: str) -> str:
    """Build the canonical embed URL for a video ID."""
    return EMBED_URL.format(video_id=video_id)


def video_id_from_url(url: object) -> str | None:
    """Extract a video ID from an item's ``url`` field.

    Args:
        url: Value of a raw item's url field (any type).

    Returns:
        The video ID, or None if the value is not a string or matches no
        known pattern.
    """
    if not isinstance(url, str) or not url or len(url) > MAX_URL_LENGTH:
        return None
    for pattern in _ITEM_URL_PATTERNS:
        if match := pattern.search(url):
            return match.group(1)
    return None


def parse_video_id(value: str | None) -> str | None:
    """Resolve a video ID from user input.

    Accepts YouTube/YouTube Music/youtu.be URLs (v= parameter, youtu.be/,
    /embed/, /watch/, /shorts/) or a bare ID-like token of at least 8
    characters.

    Args:
        value: Raw ``videoId``/``url`` request parameter.

    Returns:
        The video ID string, or None if nothing ID-like was found.
    """
    if not value or len(value) > MAX_URL_LENGTH:
        return None
    value = value.strip()
    if "youtube" in value or "youtu.be" in value:
        for pattern in _INPUT_URL_PATTERNS:
            if match := pattern.search(value):
                return match.group(1)
        return None
    if _BARE_ID_PATTERN.fullmatch(value):
        return value
    return None


def is_url(value: str) -> bool:
    """Check if a string looks like an absolute http(s) URL."""
    return value.startswith(("http://", "https://"))
