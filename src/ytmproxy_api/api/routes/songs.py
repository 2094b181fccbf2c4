"""Song API endpoints: lyrics and recommendations."""

from fastapi import APIRouter, Query, status

from ytmproxy_api.api.deps import CatalogDep
from ytmproxy_api.api.params import first_present, parse_limit, require
from ytmproxy_api.schemas.catalog import LyricsResponse, RecommendationsResponse

router = APIRouter(tags=["songs"])


@router.get("/lyrics", status_code=status.HTTP_200_OK)
async def get_lyrics(
    catalog: CatalogDep,
    video_id: str | None = Query(None, alias="videoId", description="Video ID"),
    id_: str | None = Query(None, alias="id", description="Alias for videoId"),
    q: str | None = Query(None, description="Search query when no video ID"),
    query: str | None = Query(None, description="Alias for q"),
    artist: str | None = Query(None, description="Artist, added to the query"),
    title: str | None = Query(None, description="Title, added to the query"),
) -> LyricsResponse:
    """Get lyrics by video ID, or for the first song matching a query."""
    return await catalog.lyrics(
        video_id=first_present(video_id, id_),
        query=first_present(q, query),
        artist=first_present(artist),
        title=first_present(title),
    )


@router.get("/recommendations", status_code=status.HTTP_200_OK)
async def get_recommendations(
    catalog: CatalogDep,
    video_id: str | None = Query(None, alias="videoId", description="Seed video ID"),
    id_: str | None = Query(None, alias="id", description="Alias for videoId"),
    video: str | None = Query(None, description="Alias for videoId"),
    limit: str | None = Query(None, description="Number of results (max 50)"),
) -> RecommendationsResponse:
    """Get tracks related to a seed video."""
    seed = require(
        video_id, id_, video, message="Missing videoId. Use ?videoId=<videoId>"
    )
    return await catalog.recommendations(
        seed, parse_limit(limit, catalog.limits.recommendations)
    )
