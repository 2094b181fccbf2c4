"""Health check schema."""

from ytmproxy.models.item import CanonicalModel


class HealthResponse(CanonicalModel):
    status: str = "ok"
    provider: str
    provider_ready: bool
