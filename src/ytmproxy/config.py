"""Configuration for ytmproxy."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Limit:
    """Result-count cap for one endpoint.

    Attributes:
        default: Value used when the caller sends no (or an unusable) limit.
        ceiling: Hard maximum; larger requests are clamped to it.
    """

    default: int
    ceiling: int

    def clamp(self, requested: int | None) -> int:
        """Resolve a requested limit against this cap."""
        if requested is None or requested <= 0:
            return self.default
        return min(requested, self.ceiling)


@dataclass(frozen=True)
class EndpointLimits:
    """Per-endpoint result-count caps."""

    search: Limit = Limit(default=25, ceiling=50)
    search_multi: Limit = Limit(default=50, ceiling=100)
    recommendations: Limit = Limit(default=25, ceiling=50)
    trending: Limit = Limit(default=25, ceiling=50)
    suggestions: Limit = Limit(default=10, ceiling=20)
    album_tracks: int = 500
    artist_section: int = 200
    playlist_items: int = 1000


# Ordered to favor audio-only candidates; video is the last resort.
DEFAULT_STRATEGIES: tuple[str, ...] = (
    "best_audio_stream",
    "best_dash_audio_stream",
    "stream_info",
    "dash_streams",
    "best_video_stream",
)


@dataclass(frozen=True)
class ExtractionConfig:
    """Stream extraction chain configuration.

    Attributes:
        strategies: Named operations tried in order against the primary provider.
        primary_name: Label reported when the primary provider succeeds.
        fallback_name: Label reported when the fallback provider succeeds.
    """

    strategies: tuple[str, ...] = field(default=DEFAULT_STRATEGIES)
    primary_name: str = "ytmusicapi"
    fallback_name: str = "yt-dlp-fallback"
