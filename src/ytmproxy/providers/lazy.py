"""Lazily constructed, process-wide provider handle."""

import logging
import threading
from collections.abc import Callable

from ytmproxy.exceptions import ProviderInitError, ProxyError
from ytmproxy.providers.base import MetadataProvider

logger = logging.getLogger(__name__)


class LazyProvider:
    """Builds and initializes a metadata provider on first use.

    Construction happens at most once per handle and is guarded by a lock;
    later calls return the same provider. A failed construction is not
    cached, so the next call tries again.

    Example:
        >>> handle = LazyProvider(lambda: YTMusicProvider())
        >>> provider = handle.get()  # constructed and initialized here
        >>> handle.get() is provider
        True
    """

    def __init__(self, factory: Callable[[], MetadataProvider]) -> None:
        self._factory = factory
        self._provider: MetadataProvider | None = None
        self._lock = threading.Lock()

    @property
    def is_ready(self) -> bool:
        """True once a provider has been constructed."""
        return self._provider is not None

    def get(self) -> MetadataProvider:
        """Return the provider, constructing it on first call.

        Raises:
            ProviderInitError: If construction or initialization fails.
        """
        provider = self._provider
        if provider is not None:
            return provider
        with self._lock:
            if self._provider is None:
                self._provider = self._create()
            return self._provider

    def _create(self) -> MetadataProvider:
        try:
            provider = self._factory()
            provider.initialize()
        except ProviderInitError:
            raise
        except ProxyError as e:
            raise ProviderInitError(e.message, details=e.details) from e
        except Exception as e:
            raise ProviderInitError(
                "Failed to initialize metadata provider", details=str(e)
            ) from e
        logger.info("Metadata provider ready: %s", type(provider).__name__)
        return provider

    def close(self) -> None:
        """Drop the provider; the next get() constructs a new one."""
        with self._lock:
            self._provider = None
