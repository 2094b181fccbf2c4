"""ytmproxy - Normalizing adapter for unofficial YouTube Music providers.

This library turns the unstable, weakly typed payloads of YouTube Music
metadata clients into one canonical schema, and resolves playable stream
URLs through a bounded chain of extraction strategies with a yt-dlp
fallback.

Designed for use behind an HTTP API (see ytmproxy_api) with a CLI for
debugging and development.

Examples:
    Normalize a search:
    ```python
    from ytmproxy import create_metadata_provider, extract_items

    provider = create_metadata_provider()
    items = extract_items(provider.search("daft punk", filter=None, limit=10))
    ```

    Resolve the best audio stream:
    ```python
    from ytmproxy import create_extraction_chain, pick_best_audio

    chain = create_extraction_chain(provider)
    result = chain.extract("https://music.youtube.com/watch?v=...")
    best = pick_best_audio(result.formats)
    ```
"""

from collections.abc import Sequence
from typing import Any

from ytmproxy.config import EndpointLimits, ExtractionConfig, Limit
from ytmproxy.exceptions import (
    ExtractionError,
    NormalizationFailure,
    ProviderError,
    ProviderInitError,
    ProviderTimeoutError,
    ProxyError,
    ValidationError,
)
from ytmproxy.models import (
    ExtractionResult,
    ItemType,
    NormalizedFormat,
    NormalizedItem,
    StrategyAttempt,
)
from ytmproxy.providers import (
    LazyProvider,
    MetadataProvider,
    YTDLPDumpProvider,
    get_provider_factory,
)
from ytmproxy.services import (
    ExtractionStrategyChain,
    extract_items,
    extract_lyrics_text,
    extract_suggestions,
    normalize_format,
    normalize_formats,
    normalize_item,
    normalize_suggestion,
    pick_best_audio,
    resolve_search_filter,
)


def create_metadata_provider(
    name: str = "ytmusicapi", **options: Any
) -> MetadataProvider:
    """Create and initialize a metadata provider.

    Args:
        name: Registered provider name.
        **options: Passed to the provider's constructor (e.g. language).

    Returns:
        An initialized provider.

    Raises:
        ProviderInitError: If the name is unknown or initialization fails.
    """
    provider = get_provider_factory(name)(**options)
    provider.initialize()
    return provider


def create_extraction_chain(
    provider: MetadataProvider | None,
    player_clients: Sequence[str] = (),
    config: ExtractionConfig | None = None,
) -> ExtractionStrategyChain:
    """Create an extraction chain for one request.

    Args:
        provider: Metadata provider whose client serves as the primary
            stream provider. None skips straight to the fallback.
        player_clients: Optional yt-dlp player clients for the fallback.
        config: Strategy order and provider labels.

    Returns:
        A chain with a fresh, request-scoped primary stream provider.
    """
    primary = provider.stream_provider() if provider is not None else None
    return ExtractionStrategyChain(
        primary=primary,
        fallback=YTDLPDumpProvider(player_clients=player_clients),
        config=config,
    )


__all__ = [
    "EndpointLimits",
    "ExtractionConfig",
    "ExtractionError",
    "ExtractionResult",
    "ExtractionStrategyChain",
    "ItemType",
    "LazyProvider",
    "Limit",
    "MetadataProvider",
    "NormalizationFailure",
    "NormalizedFormat",
    "NormalizedItem",
    "ProviderError",
    "ProviderInitError",
    "ProviderTimeoutError",
    "ProxyError",
    "StrategyAttempt",
    "ValidationError",
    "create_extraction_chain",
    "create_metadata_provider",
    "extract_items",
    "extract_lyrics_text",
    "extract_suggestions",
    "normalize_format",
    "normalize_formats",
    "normalize_item",
    "normalize_suggestion",
    "pick_best_audio",
    "resolve_search_filter",
]
