"""Search API endpoints."""

from fastapi import APIRouter, Query, status

from ytmproxy_api.api.deps import CatalogDep
from ytmproxy_api.api.params import parse_limit, require
from ytmproxy_api.schemas.catalog import (
    MultiSearchResponse,
    SearchResponse,
    SuggestionsResponse,
)

router = APIRouter(tags=["search"])

MISSING_QUERY = 'Query parameter "q" is required.'


@router.get("/search", status_code=status.HTTP_200_OK)
async def search(
    catalog: CatalogDep,
    q: str | None = Query(None, description="Search query"),
    query: str | None = Query(None, description="Alias for q"),
    search_type: str | None = Query(
        None,
        alias="type",
        description="Filter (songs, videos, albums, artists, playlists)",
    ),
    limit: str | None = Query(None, description="Number of results (max 50)"),
) -> SearchResponse:
    """Search YouTube Music and return normalized items."""
    text = require(q, query, message=MISSING_QUERY)
    return await catalog.search(
        text, search_type, parse_limit(limit, catalog.limits.search)
    )


@router.get("/search_multi", status_code=status.HTTP_200_OK)
async def search_multi(
    catalog: CatalogDep,
    q: str | None = Query(None, description="Search query"),
    query: str | None = Query(None, description="Alias for q"),
    limit: str | None = Query(None, description="Number of results (max 100)"),
) -> MultiSearchResponse:
    """Search every result kind at once."""
    text = require(q, query, message=MISSING_QUERY)
    return await catalog.search_multi(
        text, parse_limit(limit, catalog.limits.search_multi)
    )


@router.get("/suggestions", status_code=status.HTTP_200_OK)
async def suggestions(
    catalog: CatalogDep,
    q: str | None = Query(None, description="Partial search query"),
    query: str | None = Query(None, description="Alias for q"),
    limit: str | None = Query(None, description="Number of suggestions (max 20)"),
) -> SuggestionsResponse:
    """Get autocomplete suggestions."""
    text = require(q, query, message=MISSING_QUERY)
    return await catalog.suggestions(
        text, parse_limit(limit, catalog.limits.suggestions)
    )
