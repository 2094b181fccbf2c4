"""Upstream provider adapters.

Public API:
    YTMusicProvider - Metadata provider backed by ytmusicapi
    YTMusicStreamProvider - Primary stream provider (song streaming data)
    YTDLPDumpProvider - Fallback stream provider (yt-dlp metadata dump)
    LazyProvider - Memoized, lock-guarded provider handle
    get_provider_factory - Look up a provider implementation by name
"""

from ytmproxy.providers.base import (
    DumpProvider,
    MetadataProvider,
    StreamProvider,
    call_first,
    initialize_first,
)
from ytmproxy.providers.lazy import LazyProvider
from ytmproxy.providers.registry import (
    available_providers,
    get_provider_factory,
    register_provider,
)
from ytmproxy.providers.ytdlp import YTDLPDumpProvider
from ytmproxy.providers.ytmusic import YTMusicProvider, YTMusicStreamProvider

__all__ = [
    "DumpProvider",
    "LazyProvider",
    "MetadataProvider",
    "StreamProvider",
    "YTDLPDumpProvider",
    "YTMusicProvider",
    "YTMusicStreamProvider",
    "available_providers",
    "call_first",
    "get_provider_factory",
    "initialize_first",
    "register_provider",
]
