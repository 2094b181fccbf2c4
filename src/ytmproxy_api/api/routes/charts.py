"""Charts API endpoints."""

from fastapi import APIRouter, Query, status

from ytmproxy_api.api.deps import CatalogDep
from ytmproxy_api.api.params import first_present, parse_limit
from ytmproxy_api.schemas.catalog import TrendingResponse

router = APIRouter(tags=["charts"])


@router.get("/trending", status_code=status.HTTP_200_OK)
async def get_trending(
    catalog: CatalogDep,
    region: str | None = Query(None, description="ISO 3166-1 country code"),
    country: str | None = Query(None, description="Alias for region"),
    limit: str | None = Query(None, description="Number of results (max 50)"),
) -> TrendingResponse:
    """Get trending chart entries, globally or for one region."""
    return await catalog.trending(
        first_present(region, country),
        parse_limit(limit, catalog.limits.trending),
    )
