"""YouTube Music providers backed by ytmusicapi."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from ytmusicapi import YTMusic
from ytmusicapi.exceptions import YTMusicError

from ytmproxy.exceptions import ProviderError, ProviderInitError
from ytmproxy.providers.base import MISSING, call_first, initialize_first

logger = logging.getLogger(__name__)

# Global charts region understood by ytmusicapi
GLOBAL_REGION = "ZZ"

SEARCH_METHODS = ("search",)
SEARCH_MULTI_METHODS = ("search_multi", "searchMulti")
ALBUM_METHODS = ("get_album", "album", "browse")
ARTIST_METHODS = ("get_artist", "artist", "browse")
PLAYLIST_METHODS = ("get_playlist", "playlist", "browse")
WATCH_METHODS = ("get_watch_playlist", "get_watch_next")
LYRICS_METHODS = ("get_lyrics", "lyrics", "fetch_lyrics")
RECOMMENDATION_METHODS = ("get_watch_playlist", "get_recommendations", "get_related")
TRENDING_METHODS = ("get_charts", "get_trending", "trending")
SUGGESTION_METHODS = ("get_search_suggestions", "search_suggestions", "suggestions")
SONG_METHODS = ("get_song",)


class YTMusicProvider:
    """Metadata provider wrapping a ytmusicapi client.

    Each operation tries a short tuple of method spellings on the client so
    that renamed methods across ytmusicapi versions keep working. Operations
    the client lacks entirely return an empty payload instead of failing.
    Implements MetadataProvider.
    """

    name = "ytmusicapi"

    def __init__(
        self,
        ytmusic: Any | None = None,
        language: str = "en",
        location: str = "",
    ) -> None:
        """Initialize the provider.

        Args:
            ytmusic: Optional client instance. Creates a YTMusic if not provided.
            language: Response language passed to YTMusic.
            location: Response location passed to YTMusic.

        Raises:
            ProviderInitError: If the client cannot be constructed.
        """
        if ytmusic is not None:
            self._ytm = ytmusic
        else:
            try:
                self._ytm = YTMusic(language=language, location=location)
            except Exception as e:
                raise ProviderInitError(
                    "Failed to create YouTube Music client", details=str(e)
                ) from e

    @property
    def client(self) -> Any:
        """The wrapped client."""
        return self._ytm

    def initialize(self) -> None:
        """Run the client's own initialization, if it has one."""
        initialize_first(self._ytm)

    def _call(
        self,
        action: str,
        names: tuple[str, ...],
        *args: Any,
        empty: Callable[[], Any] = dict,
        **kwargs: Any,
    ) -> Any:
        """Call the first existing method among ``names`` on the client.

        Raises:
            ProviderError: If the client call raised.
        """
        try:
            result = call_first(self._ytm, names, *args, **kwargs)
        except YTMusicError as e:
            logger.warning("YTMusic error during %s: %s", action, e)
            raise ProviderError(f"Failed to {action}", details=str(e)) from e
        except (KeyError, TypeError, ValueError) as e:
            # ytmusicapi raises these when YouTube changes its response layout
            logger.warning("Unexpected YTMusic response during %s: %s", action, e)
            raise ProviderError(f"Failed to {action}", details=str(e)) from e
        if result is MISSING:
            logger.warning("Client supports no method to %s", action)
            return empty()
        return result

    def search(self, query: str, filter: str | None = None, limit: int = 20) -> Any:
        return self._call(
            "search", SEARCH_METHODS, query, filter=filter, limit=limit, empty=list
        )

    def search_multi(self, query: str, limit: int = 50) -> Any:
        if any(callable(getattr(self._ytm, n, None)) for n in SEARCH_MULTI_METHODS):
            return self._call("search", SEARCH_MULTI_METHODS, query)
        return self.search(query, limit=limit)

    def get_album(self, album_id: str) -> Any:
        return self._call("fetch album", ALBUM_METHODS, album_id)

    def get_artist(self, artist_id: str) -> Any:
        return self._call("fetch artist", ARTIST_METHODS, artist_id)

    def get_playlist(self, playlist_id: str, limit: int = 100) -> Any:
        return self._call("fetch playlist", PLAYLIST_METHODS, playlist_id, limit=limit)

    def get_lyrics(self, video_id: str) -> Any:
        """Fetch lyrics for a song.

        ytmusicapi exposes lyrics by browse ID, which is only available from
        the song's watch playlist.

        Returns:
            The lyrics payload, or an empty dict if the song has no lyrics.
        """
        watch = self._call("fetch lyrics", WATCH_METHODS, video_id)
        lyrics_id = watch.get("lyrics") if isinstance(watch, dict) else None
        if not lyrics_id:
            logger.debug("No lyrics available for %s", video_id)
            return {}
        return self._call("fetch lyrics", LYRICS_METHODS, lyrics_id)

    def get_recommendations(self, video_id: str, limit: int = 25) -> Any:
        return self._call(
            "fetch recommendations", RECOMMENDATION_METHODS, video_id, limit=limit
        )

    def get_trending(self, region: str | None = None) -> Any:
        return self._call(
            "fetch trending", TRENDING_METHODS, country=region or GLOBAL_REGION
        )

    def get_suggestions(self, query: str) -> Any:
        """Fetch search suggestions.

        Falls back to the titles of a plain search when the client has no
        suggestion method.
        """
        result = self._call(
            "fetch suggestions", SUGGESTION_METHODS, query, empty=lambda: None
        )
        if result is not None:
            return result
        results = self.search(query)
        if isinstance(results, list):
            return [{"title": r.get("title")} for r in results if isinstance(r, dict)]
        if isinstance(results, dict):
            return results.get("results") or []
        return []

    def stream_provider(self) -> YTMusicStreamProvider:
        """Build a request-scoped stream provider on this provider's client."""
        return YTMusicStreamProvider(self._ytm)


class YTMusicStreamProvider:
    """Primary stream provider reading a song's streaming data.

    Exposes the named strategy operations used by ExtractionStrategyChain.
    The song payload is fetched once per video and reused across strategies,
    so instances are meant to live for a single request.
    """

    def __init__(self, ytmusic: Any) -> None:
        self._ytm = ytmusic
        self._songs: dict[str, dict[str, Any]] = {}
        self._failures: dict[str, ProviderError] = {}

    def _fetch_song(self, video_id: str) -> dict[str, Any]:
        """Fetch the song payload once; a failed fetch is remembered too.

        Raises:
            ProviderError: If the client fails or returns no song data.
        """
        if video_id in self._failures:
            raise self._failures[video_id]
        if video_id not in self._songs:
            try:
                song = call_first(self._ytm, SONG_METHODS, video_id)
            except Exception as e:
                logger.debug("get_song failed for %s: %s", video_id, e)
                error = ProviderError("Failed to fetch song", details=str(e))
                self._failures[video_id] = error
                raise error from e
            if song is MISSING or not isinstance(song, dict):
                error = ProviderError("Client returned no song data")
                self._failures[video_id] = error
                raise error
            self._songs[video_id] = song
        return self._songs[video_id]

    def _streaming_data(self, video_id: str) -> dict[str, Any]:
        """Fetch and validate the streaming data for a video.

        Raises:
            ProviderError: If the song is unplayable or the client fails.
        """
        song = self._fetch_song(video_id)
        playability = song.get("playabilityStatus") or {}
        status = playability.get("status", "OK")
        if status != "OK":
            reason = playability.get("reason") or status
            raise ProviderError(f"Video is not playable: {reason}")
        return song.get("streamingData") or {}

    def _adaptive(self, video_id: str) -> list[dict[str, Any]]:
        return list(self._streaming_data(video_id).get("adaptiveFormats") or [])

    def _muxed(self, video_id: str) -> list[dict[str, Any]]:
        return list(self._streaming_data(video_id).get("formats") or [])

    @staticmethod
    def _is_audio(fmt: dict[str, Any]) -> bool:
        return str(fmt.get("mimeType", "")).startswith("audio/")

    @staticmethod
    def _best(formats: list[dict[str, Any]]) -> dict[str, Any] | None:
        if not formats:
            return None
        return max(formats, key=lambda f: f.get("bitrate") or 0)

    def best_audio_stream(self, video_id: str) -> dict[str, Any] | None:
        """Highest-bitrate audio-only format in any container."""
        return self._best([f for f in self._adaptive(video_id) if self._is_audio(f)])

    def best_dash_audio_stream(self, video_id: str) -> dict[str, Any] | None:
        """Highest-bitrate audio-only MP4 (DASH/m4a) format."""
        return self._best(
            [
                f
                for f in self._adaptive(video_id)
                if str(f.get("mimeType", "")).startswith("audio/mp4")
            ]
        )

    def stream_info(self, video_id: str) -> dict[str, Any]:
        """All formats wrapped with the streaming data's metadata."""
        data = self._streaming_data(video_id)
        return {
            "formats": self._muxed(video_id) + self._adaptive(video_id),
            "expiresInSeconds": data.get("expiresInSeconds"),
        }

    def dash_streams(self, video_id: str) -> list[dict[str, Any]]:
        """Every adaptive (DASH) format."""
        return self._adaptive(video_id)

    def best_video_stream(self, video_id: str) -> dict[str, Any] | None:
        """Highest-bitrate muxed audio+video format."""
        return self._best(self._muxed(video_id))
