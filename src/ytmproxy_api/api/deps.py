"""FastAPI dependency injection factories.

Dependencies are defined as Annotated types for clean, reusable injection.

Usage in routes:
    from ytmproxy_api.api.deps import CatalogDep

    @router.get("/album")
    async def get_album(catalog: CatalogDep) -> ...:
        ...
"""

from typing import Annotated

from fastapi import Depends
from ytmproxy.providers import LazyProvider

from ytmproxy_api.api.container import Services, get_services
from ytmproxy_api.services import CatalogService, StreamService

# -- Service dependencies (request-scoped via app.state) --

ServicesDep = Annotated[Services, Depends(get_services)]


def _get_catalog(services: ServicesDep) -> CatalogService:
    """Get catalog service from services container."""
    return services.catalog


def _get_streams(services: ServicesDep) -> StreamService:
    """Get stream service from services container."""
    return services.streams


def _get_provider(services: ServicesDep) -> LazyProvider:
    """Get metadata provider handle from services container."""
    return services.provider


CatalogDep = Annotated[CatalogService, Depends(_get_catalog)]
StreamsDep = Annotated[StreamService, Depends(_get_streams)]
ProviderDep = Annotated[LazyProvider, Depends(_get_provider)]
