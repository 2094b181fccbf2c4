"""Provider protocols and method lookup.

Upstream client libraries rename and reshape their methods between versions.
Adapters therefore call them through short tuples of equivalent method
names instead of assuming one fixed spelling.
"""

import logging
from collections.abc import Sequence
from typing import Any, Protocol

from ytmproxy.exceptions import ProviderInitError

logger = logging.getLogger(__name__)

# Initialization spellings seen across client library versions
INIT_METHOD_NAMES = ("initialize", "initalize", "init")


class MissingOperation:
    """Sentinel returned by call_first() when no method name exists."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING = MissingOperation()


class MetadataProvider(Protocol):
    """Protocol for metadata providers.

    Every operation returns the provider's raw, untyped payload. Callers
    normalize it; nothing here promises a shape.
    """

    name: str

    def initialize(self) -> None:
        """Prepare the client for use. Must be idempotent."""
        ...

    def search(self, query: str, filter: str | None, limit: int) -> Any: ...

    def search_multi(self, query: str, limit: int) -> Any: ...

    def get_album(self, album_id: str) -> Any: ...

    def get_artist(self, artist_id: str) -> Any: ...

    def get_playlist(self, playlist_id: str, limit: int) -> Any: ...

    def get_lyrics(self, video_id: str) -> Any: ...

    def get_recommendations(self, video_id: str, limit: int) -> Any: ...

    def get_trending(self, region: str | None) -> Any: ...

    def get_suggestions(self, query: str) -> Any: ...

    def stream_provider(self) -> "StreamProvider":
        """Build a request-scoped stream provider on the same client."""
        ...


class StreamProvider(Protocol):
    """Protocol for primary stream providers.

    Strategy operations are looked up by name (see ExtractionConfig) and are
    all optional; each takes a video ID and returns a single descriptor, a
    list of descriptors, a wrapper record with a ``formats`` list, or None.
    """


class DumpProvider(Protocol):
    """Protocol for fallback providers that dump full video metadata."""

    def dump(self, url: str) -> Any:
        """Return the metadata record for ``url`` including its formats."""
        ...


def find_operation(target: object, names: Sequence[str]) -> tuple[str, Any] | None:
    """Find the first callable attribute of ``target`` among ``names``."""
    for name in names:
        operation = getattr(target, name, None)
        if callable(operation):
            return name, operation
    return None


def call_first(target: object, names: Sequence[str], *args: Any, **kwargs: Any) -> Any:
    """Call the first method of ``target`` that exists among ``names``.

    Only the first existing method is called; its exceptions propagate.

    Returns:
        The method's return value, or MISSING if none of the names exist.
    """
    found = find_operation(target, names)
    if found is None:
        logger.debug(
            "%s exposes none of %s", type(target).__name__, ", ".join(names)
        )
        return MISSING
    name, operation = found
    logger.debug("Calling %s.%s", type(target).__name__, name)
    return operation(*args, **kwargs)


def initialize_first(
    target: object, names: Sequence[str] = INIT_METHOD_NAMES
) -> str | None:
    """Run the client's initialization method under any known spelling.

    Each existing spelling is tried until one succeeds. A client exposing
    none of them needs no initialization.

    Returns:
        The name of the method that succeeded, or None if none exist.

    Raises:
        ProviderInitError: If every existing initialization method raised.
    """
    errors: list[str] = []
    for name in names:
        operation = getattr(target, name, None)
        if not callable(operation):
            continue
        try:
            operation()
        except Exception as e:
            logger.debug("%s.%s() failed: %s", type(target).__name__, name, e)
            errors.append(f"{name}: {e}")
            continue
        logger.debug("Initialized %s via %s()", type(target).__name__, name)
        return name

    if errors:
        raise ProviderInitError(
            "Failed to initialize provider", details="; ".join(errors)
        )
    return None
