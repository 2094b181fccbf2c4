"""Test fixtures and configuration for ytmproxy tests.

This module provides shared fixtures organized into:
- Fake clients: ytmusicapi-like clients with limited surfaces
- Fake providers: stream, dump and metadata providers for chain/service tests
- Sample payloads: raw provider responses
"""

from __future__ import annotations

from typing import Any

import pytest
from ytmproxy.providers import LazyProvider

# =============================================================================
# Sample Payloads
# =============================================================================


SEARCH_RESULTS: list[dict[str, Any]] = [
    {
        "resultType": "song",
        "videoId": "vid00000001",
        "title": "Around the World",
        "artists": [{"name": "Daft Punk", "id": "UCdp"}],
        "duration": "7:09",
        "duration_seconds": 429,
        "thumbnails": [{"url": "https://img/1.jpg", "width": 60}],
    },
    {
        "resultType": "album",
        "browseId": "MPREb_album1",
        "title": "Discovery",
        "artists": [{"name": "Daft Punk"}],
        "thumbnails": [],
    },
    {
        "resultType": "artist",
        "browseId": "UCdp",
        "artist": "Daft Punk",
        "thumbnails": [],
    },
]

ALBUM_PAYLOAD: dict[str, Any] = {
    "title": "Discovery",
    "artists": [{"name": "Daft Punk", "id": "UCdp"}],
    "thumbnails": [{"url": "https://img/discovery.jpg"}],
    "tracks": [
        {"videoId": "vid00000010", "title": "One More Time", "duration": "5:20"},
        {"videoId": "vid00000011", "title": "Aerodynamic", "duration": "3:27"},
    ],
    "other_versions": [{"browseId": "MPREb_other", "title": "Discovery (Live)"}],
}


def song_payload(
    adaptive: list[dict[str, Any]] | None = None,
    muxed: list[dict[str, Any]] | None = None,
    status: str = "OK",
    reason: str | None = None,
) -> dict[str, Any]:
    """Build a get_song payload with the given streaming formats."""
    playability: dict[str, Any] = {"status": status}
    if reason:
        playability["reason"] = reason
    return {
        "playabilityStatus": playability,
        "streamingData": {
            "expiresInSeconds": "21540",
            "formats": muxed or [],
            "adaptiveFormats": adaptive or [],
        },
    }


# =============================================================================
# Fake Clients
# =============================================================================


class FakeYTMusic:
    """ytmusicapi-like client exposing the current method names."""

    def __init__(self, song: dict[str, Any] | None = None) -> None:
        self.calls: list[tuple[str, tuple[Any, ...], dict[str, Any]]] = []
        self.song = song or song_payload()

    def _record(self, name: str, *args: Any, **kwargs: Any) -> None:
        self.calls.append((name, args, kwargs))

    def search(self, query: str, filter: str | None = None, limit: int = 20) -> Any:
        self._record("search", query, filter=filter, limit=limit)
        return SEARCH_RESULTS

    def get_album(self, browse_id: str) -> Any:
        self._record("get_album", browse_id)
        return ALBUM_PAYLOAD

    def get_watch_playlist(self, video_id: str, limit: int = 25) -> Any:
        self._record("get_watch_playlist", video_id, limit=limit)
        return {
            "tracks": [
                {"videoId": video_id, "title": "Seed"},
                {"videoId": "vid00000020", "title": "Related"},
            ],
            "lyrics": "MPLYt_lyrics",
        }

    def get_lyrics(self, browse_id: str) -> Any:
        self._record("get_lyrics", browse_id)
        return {"lyrics": "One more time, we're gonna celebrate", "source": "LyricFind"}

    def get_charts(self, country: str = "ZZ") -> Any:
        self._record("get_charts", country=country)
        return {"videos": [{"videoId": "vid00000030", "title": "Chart Hit"}]}

    def get_search_suggestions(self, query: str) -> Any:
        self._record("get_search_suggestions", query)
        return [f"{query} live", f"{query} remix"]

    def get_song(self, video_id: str) -> Any:
        self._record("get_song", video_id)
        return self.song


class LegacyClient:
    """Client from an older library generation with other method spellings."""

    def __init__(self) -> None:
        self.initialized_with: str | None = None

    def initalize(self) -> None:
        self.initialized_with = "initalize"

    def album(self, browse_id: str) -> Any:
        return {"songs": [{"videoId": "vid00000040", "title": "Legacy"}]}

    def browse(self, browse_id: str) -> Any:
        raise AssertionError("browse must not be called when album exists")


class BareClient:
    """Client exposing none of the known operations."""


# =============================================================================
# Fake Providers
# =============================================================================


class FakeStreamProvider:
    """Stream provider exposing only the strategies it is given.

    Each strategy value is either a return value or an exception to raise.
    """

    def __init__(self, **strategies: Any) -> None:
        self.calls: list[str] = []
        for name, outcome in strategies.items():
            setattr(self, name, self._make(name, outcome))

    def _make(self, name: str, outcome: Any) -> Any:
        def strategy(video_id: str) -> Any:
            self.calls.append(name)
            if isinstance(outcome, BaseException):
                raise outcome
            return outcome

        return strategy


class FakeDumpProvider:
    """Fallback provider returning a fixed dump or raising."""

    def __init__(self, result: Any = None, error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.urls: list[str] = []

    def dump(self, url: str) -> Any:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.result


class FakeMetadataProvider:
    """MetadataProvider returning canned responses.

    Responses are keyed by method name; an exception value is raised.
    """

    name = "fake"

    def __init__(self, **responses: Any) -> None:
        self.responses = responses
        self.calls: list[tuple[str, tuple[Any, ...], dict[str, Any]]] = []
        self.initialized = False

    def initialize(self) -> None:
        self.initialized = True

    def _respond(self, name: str, *args: Any, **kwargs: Any) -> Any:
        self.calls.append((name, args, kwargs))
        outcome = self.responses.get(name, {})
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    def search(self, query: str, filter: str | None = None, limit: int = 20) -> Any:
        return self._respond("search", query, filter=filter, limit=limit)

    def search_multi(self, query: str, limit: int = 50) -> Any:
        return self._respond("search_multi", query, limit=limit)

    def get_album(self, album_id: str) -> Any:
        return self._respond("get_album", album_id)

    def get_artist(self, artist_id: str) -> Any:
        return self._respond("get_artist", artist_id)

    def get_playlist(self, playlist_id: str, limit: int = 100) -> Any:
        return self._respond("get_playlist", playlist_id, limit=limit)

    def get_lyrics(self, video_id: str) -> Any:
        return self._respond("get_lyrics", video_id)

    def get_recommendations(self, video_id: str, limit: int = 25) -> Any:
        return self._respond("get_recommendations", video_id, limit=limit)

    def get_trending(self, region: str | None = None) -> Any:
        return self._respond("get_trending", region)

    def get_suggestions(self, query: str) -> Any:
        return self._respond("get_suggestions", query)

    def stream_provider(self) -> Any:
        return FakeStreamProvider()


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def fake_ytmusic() -> FakeYTMusic:
    """Create a ytmusicapi-like client."""
    return FakeYTMusic()


@pytest.fixture
def make_lazy_provider():
    """Wrap a fake metadata provider in a LazyProvider."""

    def _make(provider: FakeMetadataProvider) -> LazyProvider:
        return LazyProvider(lambda: provider)

    return _make
