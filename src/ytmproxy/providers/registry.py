"""Registry of metadata provider implementations.

The provider is chosen by name from configuration at startup, not looked up
per call.
"""

from collections.abc import Callable

from ytmproxy.exceptions import ProviderInitError
from ytmproxy.providers.base import MetadataProvider
from ytmproxy.providers.ytmusic import YTMusicProvider

ProviderFactory = Callable[..., MetadataProvider]

_PROVIDERS: dict[str, ProviderFactory] = {
    YTMusicProvider.name: YTMusicProvider,
}


def register_provider(name: str, factory: ProviderFactory) -> None:
    """Register a metadata provider factory under ``name``."""
    _PROVIDERS[name] = factory


def available_providers() -> list[str]:
    """Names of all registered metadata providers."""
    return sorted(_PROVIDERS)


def get_provider_factory(name: str) -> ProviderFactory:
    """Look up a provider factory by name.

    Raises:
        ProviderInitError: If no provider is registered under ``name``.
    """
    try:
        return _PROVIDERS[name]
    except KeyError:
        raise ProviderInitError(
            f"Unknown metadata provider: {name}",
            details=f"available: {', '.join(available_providers())}",
        ) from None
