"""Health check endpoint."""

from fastapi import APIRouter, status

from ytmproxy_api.api.deps import ProviderDep, ServicesDep
from ytmproxy_api.schemas.health import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
async def health(services: ServicesDep, provider: ProviderDep) -> HealthResponse:
    """Report liveness; does not touch the provider."""
    return HealthResponse(
        provider=services.settings.metadata_provider,
        provider_ready=provider.is_ready,
    )
