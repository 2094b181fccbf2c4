"""Catalog service: metadata endpoints over the shared provider.

Each public method validates its arguments, runs one provider operation in a
worker thread under the configured timeout, and normalizes the raw result
into a response schema.
"""

import asyncio
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from ytmproxy import (
    EndpointLimits,
    extract_items,
    extract_lyrics_text,
    extract_suggestions,
)
from ytmproxy.exceptions import (
    ProviderError,
    ProviderTimeoutError,
    ProxyError,
    ValidationError,
)
from ytmproxy.models import ItemType, NormalizedItem
from ytmproxy.providers import LazyProvider, MetadataProvider
from ytmproxy.services import (
    ALBUM_BUCKETS,
    ARTIST_BUCKETS,
    PLAYLIST_BUCKETS,
    RECOMMENDATION_BUCKETS,
    TRENDING_BUCKETS,
    resolve_search_filter,
    song_type_hint,
)
from ytmproxy.utils import coerce_to_list, extract_display_name, first_present

from ytmproxy_api.schemas.catalog import (
    AlbumInfo,
    AlbumResponse,
    ArtistInfo,
    ArtistResponse,
    LyricsResponse,
    MultiSearchResponse,
    PlaylistInfo,
    PlaylistResponse,
    RecommendationsResponse,
    SearchResponse,
    SuggestionsResponse,
    TrendingResponse,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def classify_artist_items(
    items: list[NormalizedItem],
) -> tuple[list[NormalizedItem], list[NormalizedItem], list[NormalizedItem]]:
    """Split an artist's items into songs, albums and playlists.

    Anything playable counts as a song; anything that is neither a song nor
    an album is grouped with playlists.
    """
    songs: list[NormalizedItem] = []
    albums: list[NormalizedItem] = []
    playlists: list[NormalizedItem] = []
    for item in items:
        if item.type in (ItemType.SONG, ItemType.VIDEO) or item.video_id:
            songs.append(item)
        elif item.type is ItemType.ALBUM:
            albums.append(item)
        else:
            playlists.append(item)
    return songs, albums, playlists


def _header_text(raw: Any, *fields: str) -> str | None:
    if not isinstance(raw, dict):
        return None
    value = first_present(raw, fields)
    return value if isinstance(value, str) else None


def _header_artists(raw: Any) -> list[str]:
    if not isinstance(raw, dict):
        return []
    names = (
        extract_display_name(entry)
        for entry in coerce_to_list(first_present(raw, ("artists", "artist")))
    )
    return [name for name in names if name]


def _header_thumbnails(raw: Any) -> list[Any]:
    if not isinstance(raw, dict):
        return []
    return coerce_to_list(first_present(raw, ("thumbnails", "thumbnail")))


class CatalogService:
    """Metadata operations for the HTTP layer.

    Provider calls are blocking, so each one runs in a worker thread. Errors
    already in the ytmproxy taxonomy propagate unchanged; anything else is
    wrapped in ProviderError with the action that failed.
    """

    def __init__(
        self,
        provider: LazyProvider,
        timeout: float = 20.0,
        limits: EndpointLimits | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            provider: Shared, lazily initialized metadata provider.
            timeout: Seconds allowed for one provider call.
            limits: Per-endpoint result caps.
        """
        self._provider = provider
        self._timeout = timeout
        self.limits = limits or EndpointLimits()

    async def _run(self, action: str, operation: Callable[[MetadataProvider], T]) -> T:
        """Run ``operation`` against the provider in a worker thread.

        Raises:
            ProviderTimeoutError: If the call exceeds the timeout.
            ProviderInitError: If the provider cannot be initialized.
            ProviderError: If the provider call failed.
        """

        def call() -> T:
            return operation(self._provider.get())

        try:
            return await asyncio.wait_for(asyncio.to_thread(call), self._timeout)
        except TimeoutError as e:
            logger.warning("Timed out trying to %s after %ss", action, self._timeout)
            raise ProviderTimeoutError(
                f"Timed out trying to {action}",
                details=f"no response within {self._timeout:g}s",
            ) from e
        except ProxyError:
            raise
        except Exception as e:
            logger.exception("Unexpected error trying to %s", action)
            raise ProviderError(f"Failed to {action}", details=str(e)) from e

    async def search(
        self, query: str, type_: str | None = None, limit: int | None = None
    ) -> SearchResponse:
        search_filter = resolve_search_filter(type_)
        limit = self.limits.search.clamp(limit)
        raw = await self._run(
            "search", lambda p: p.search(query, filter=search_filter, limit=limit)
        )
        items = extract_items(raw)[:limit]
        logger.debug("Search %r (%s): %d items", query, search_filter, len(items))
        return SearchResponse(query=query, type=search_filter, items=items)

    async def search_multi(
        self, query: str, limit: int | None = None
    ) -> MultiSearchResponse:
        limit = self.limits.search_multi.clamp(limit)
        raw = await self._run("search", lambda p: p.search_multi(query, limit=limit))
        return MultiSearchResponse(query=query, items=extract_items(raw)[:limit])

    async def album(self, album_id: str) -> AlbumResponse:
        """Fetch an album header and its tracks."""
        raw = await self._run("fetch album", lambda p: p.get_album(album_id))
        tracks = extract_items(raw, song_type_hint, buckets=ALBUM_BUCKETS)
        album = AlbumInfo(
            id=album_id,
            title=_header_text(raw, "title", "name", "subtitle"),
            artists=_header_artists(raw),
            thumbnails=_header_thumbnails(raw),
            raw=raw,
        )
        return AlbumResponse(album=album, tracks=tracks[: self.limits.album_tracks])

    async def artist(self, artist_id: str) -> ArtistResponse:
        """Fetch an artist header and their songs, albums and playlists."""
        raw = await self._run("fetch artist", lambda p: p.get_artist(artist_id))
        songs, albums, playlists = classify_artist_items(
            extract_items(raw, buckets=ARTIST_BUCKETS)
        )
        cap = self.limits.artist_section
        artist = ArtistInfo(
            id=artist_id,
            name=_header_text(raw, "name", "title", "artist"),
            thumbnails=_header_thumbnails(raw),
            raw=raw,
        )
        return ArtistResponse(
            artist=artist,
            songs=songs[:cap],
            albums=albums[:cap],
            playlists=playlists[:cap],
        )

    async def playlist(self, playlist_id: str) -> PlaylistResponse:
        """Fetch a playlist header and its items."""
        cap = self.limits.playlist_items
        raw = await self._run(
            "fetch playlist", lambda p: p.get_playlist(playlist_id, limit=cap)
        )
        items = extract_items(raw, buckets=PLAYLIST_BUCKETS)
        playlist = PlaylistInfo(
            id=playlist_id,
            title=_header_text(raw, "title", "name", "subtitle"),
            description=_header_text(raw, "description"),
            thumbnails=_header_thumbnails(raw),
            raw=raw,
        )
        return PlaylistResponse(playlist=playlist, items=items[:cap])

    async def lyrics(
        self,
        video_id: str | None = None,
        query: str | None = None,
        artist: str | None = None,
        title: str | None = None,
    ) -> LyricsResponse:
        """Fetch lyrics by video ID, or for the first song matching a query.

        Raises:
            ValidationError: If neither a video ID nor a query is given.
        """
        if not video_id and not query:
            raise ValidationError(
                "Provide either videoId (?videoId=...) or a search query (?q=...)"
            )

        def fetch(provider: MetadataProvider) -> tuple[str | None, Any]:
            target = video_id
            if not target:
                terms = " ".join(t for t in (query, artist, title) if t)
                hits = extract_items(provider.search(terms, filter="songs", limit=1))
                target = next((h.video_id for h in hits if h.video_id), None)
                if not target:
                    logger.debug("No song found for lyrics query %r", terms)
                    return None, {}
            return target, provider.get_lyrics(target)

        resolved_id, raw = await self._run("fetch lyrics", fetch)
        return LyricsResponse(
            video_id=resolved_id,
            query=query,
            lyrics=extract_lyrics_text(raw),
            raw=raw,
        )

    async def recommendations(
        self, video_id: str, limit: int | None = None
    ) -> RecommendationsResponse:
        """Fetch tracks related to ``video_id``, excluding the seed itself."""
        limit = self.limits.recommendations.clamp(limit)
        raw = await self._run(
            "fetch recommendations",
            # one extra in case the seed leads the list
            lambda p: p.get_recommendations(video_id, limit=limit + 1),
        )
        related = extract_items(raw, song_type_hint, buckets=RECOMMENDATION_BUCKETS)
        items = [item for item in related if item.video_id != video_id]
        return RecommendationsResponse(video_id=video_id, items=items[:limit])

    async def trending(
        self, region: str | None = None, limit: int | None = None
    ) -> TrendingResponse:
        limit = self.limits.trending.clamp(limit)
        raw = await self._run("fetch trending", lambda p: p.get_trending(region))
        items = extract_items(raw, buckets=TRENDING_BUCKETS)[:limit]
        return TrendingResponse(region=region, items=items)

    async def suggestions(
        self, query: str, limit: int | None = None
    ) -> SuggestionsResponse:
        limit = self.limits.suggestions.clamp(limit)
        raw = await self._run("fetch suggestions", lambda p: p.get_suggestions(query))
        suggestions = extract_suggestions(raw)[:limit]
        return SuggestionsResponse(query=query, suggestions=suggestions)
