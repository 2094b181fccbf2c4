"""Services backing the HTTP endpoints."""

from ytmproxy_api.services.catalog import CatalogService
from ytmproxy_api.services.streams import StreamService

__all__ = ["CatalogService", "StreamService"]
