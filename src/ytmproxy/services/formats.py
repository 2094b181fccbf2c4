"""Stream format normalization and best-audio selection."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from ytmproxy.models.stream import NormalizedFormat
from ytmproxy.utils.coercion import as_number, as_text, first_present

logger = logging.getLogger(__name__)

URL_FIELDS = (
    "url",
    "uri",
    "audioUrl",
    "baseUrl",
    "cdnUrl",
    "downloadUrl",
    "mediaUrl",
    "urlString",
    "direct_url",
)
MIME_TYPE_FIELDS = ("mimeType", "type", "contentType", "ext")
BITRATE_FIELDS = ("bitrate", "bps", "tbr")
AUDIO_BITRATE_FIELDS = ("audioBitrate", "abr")
QUALITY_FIELDS = ("qualityLabel", "quality", "label", "format", "format_note")

# yt-dlp marks an absent codec with this sentinel
NO_CODEC = "none"


def _is_audio_only(raw: Mapping[str, Any], mime_type: str | None) -> bool:
    if mime_type and "audio" in mime_type:
        return True
    acodec = raw.get("acodec")
    vcodec = raw.get("vcodec")
    if acodec and acodec != NO_CODEC and not vcodec:
        return True
    if vcodec == NO_CODEC:
        return True
    kind = raw.get("type")
    return bool(kind) and "audio" in str(kind).lower()


def normalize_format(raw: Any) -> NormalizedFormat:
    """Normalize one raw stream descriptor.

    Never raises; an unreadable descriptor yields a format without URL,
    which callers discard.
    """
    if not isinstance(raw, Mapping):
        return NormalizedFormat(raw=raw)
    try:
        mime_type = as_text(first_present(raw, MIME_TYPE_FIELDS))
        return NormalizedFormat(
            url=as_text(first_present(raw, URL_FIELDS)),
            mime_type=mime_type,
            bitrate=as_number(first_present(raw, BITRATE_FIELDS)),
            audio_bitrate=as_number(first_present(raw, AUDIO_BITRATE_FIELDS)),
            quality_label=as_text(first_present(raw, QUALITY_FIELDS)),
            is_audio_only=_is_audio_only(raw, mime_type),
            raw=raw,
        )
    except Exception as e:
        logger.debug("Could not normalize format (%s): %r", e, raw)
        return NormalizedFormat(raw=raw)


def normalize_formats(raws: Iterable[Any]) -> list[NormalizedFormat]:
    """Normalize descriptors, drop those without URL and dedupe by URL.

    The first occurrence of each URL wins and order is preserved.
    """
    seen: set[str] = set()
    formats: list[NormalizedFormat] = []
    for raw in raws:
        fmt = normalize_format(raw)
        if not fmt.url or fmt.url in seen:
            continue
        seen.add(fmt.url)
        formats.append(fmt)
    return formats


def _audio_rank(fmt: NormalizedFormat) -> float:
    return float(fmt.audio_bitrate or fmt.bitrate or 0)


def _bitrate_rank(fmt: NormalizedFormat) -> float:
    return float(fmt.bitrate or 0)


def pick_best_audio(formats: list[NormalizedFormat]) -> NormalizedFormat | None:
    """Pick the best audio candidate.

    Prefers audio-only formats ranked by audio bitrate (falling back to
    bitrate); without any, takes the highest-bitrate format overall. Ties
    go to the earliest format.

    Returns:
        The chosen format, or None if ``formats`` is empty.
    """
    if not formats:
        return None
    audio = [f for f in formats if f.is_audio_only]
    if audio:
        # max() keeps the first of equally ranked elements
        return max(audio, key=_audio_rank)
    return max(formats, key=_bitrate_rank)
