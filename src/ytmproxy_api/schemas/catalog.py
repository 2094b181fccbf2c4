"""Catalog API schemas.

Item lists are capped by the catalog service before they reach these
models; ``count`` always reflects the list actually returned.
"""

from typing import Any

from pydantic import Field, computed_field
from ytmproxy.models import NormalizedItem
from ytmproxy.models.item import CanonicalModel


class ItemListResponse(CanonicalModel):
    """Base for responses carrying one list of normalized items."""

    items: list[NormalizedItem] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def count(self) -> int:
        return len(self.items)


class SearchResponse(ItemListResponse):
    """Response for a filtered search."""

    query: str
    type: str | None = None


class MultiSearchResponse(ItemListResponse):
    """Response for an unfiltered, multi-bucket search."""

    query: str


class RecommendationsResponse(ItemListResponse):
    """Tracks related to a seed video."""

    video_id: str


class TrendingResponse(ItemListResponse):
    """Chart entries for a region."""

    source: str = "trending"
    region: str | None = None


class SuggestionsResponse(CanonicalModel):
    """Autocomplete suggestions for a partial query."""

    query: str
    suggestions: list[NormalizedItem] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def count(self) -> int:
        return len(self.suggestions)


class AlbumInfo(CanonicalModel):
    id: str
    title: str | None = None
    artists: list[str] = Field(default_factory=list)
    thumbnails: list[Any] = Field(default_factory=list)
    raw: Any = None


class AlbumResponse(CanonicalModel):
    album: AlbumInfo
    tracks: list[NormalizedItem] = Field(default_factory=list)


class ArtistInfo(CanonicalModel):
    id: str
    name: str | None = None
    thumbnails: list[Any] = Field(default_factory=list)
    raw: Any = None


class ArtistResponse(CanonicalModel):
    """Artist header plus their items, classified by kind."""

    artist: ArtistInfo
    songs: list[NormalizedItem] = Field(default_factory=list)
    albums: list[NormalizedItem] = Field(default_factory=list)
    playlists: list[NormalizedItem] = Field(default_factory=list)


class PlaylistInfo(CanonicalModel):
    id: str
    title: str | None = None
    description: str | None = None
    thumbnails: list[Any] = Field(default_factory=list)
    raw: Any = None


class PlaylistResponse(CanonicalModel):
    playlist: PlaylistInfo
    items: list[NormalizedItem] = Field(default_factory=list)


class LyricsResponse(CanonicalModel):
    """Lyrics for a song, looked up by video ID or by search query."""

    video_id: str | None = None
    query: str | None = None
    lyrics: str | None = None
    raw: Any = None
