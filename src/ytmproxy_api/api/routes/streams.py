"""Stream extraction API endpoints."""

from fastapi import APIRouter, Query, status

from ytmproxy_api.api.deps import StreamsDep
from ytmproxy_api.api.params import require
from ytmproxy_api.schemas.streams import ExtractResponse

router = APIRouter(tags=["streams"])


@router.get("/extract", status_code=status.HTTP_200_OK)
async def extract(
    streams: StreamsDep,
    video_id: str | None = Query(None, alias="videoId", description="Video ID"),
    v: str | None = Query(None, description="Alias for videoId"),
    url: str | None = Query(None, description="YouTube or YouTube Music URL"),
    q: str | None = Query(None, description="Alias for videoId"),
) -> ExtractResponse:
    """Resolve playable stream formats and the best audio candidate."""
    video = require(
        video_id,
        v,
        url,
        q,
        message="Missing videoId (use ?videoId=VIDEO_ID or ?url=YOUTUBE_URL)",
    )
    return await streams.extract(video)
