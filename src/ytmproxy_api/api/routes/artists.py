"""Artist API endpoints."""

from fastapi import APIRouter, Query, status

from ytmproxy_api.api.deps import CatalogDep
from ytmproxy_api.api.params import require
from ytmproxy_api.schemas.catalog import ArtistResponse

router = APIRouter(tags=["artists"])


@router.get("/artist", status_code=status.HTTP_200_OK)
async def get_artist(
    catalog: CatalogDep,
    id_: str | None = Query(None, alias="id", description="Artist browse ID"),
    artist_id: str | None = Query(None, alias="artistId"),
    browse_id: str | None = Query(None, alias="browseId"),
) -> ArtistResponse:
    """Get an artist with their songs, albums and playlists."""
    artist = require(
        id_, artist_id, browse_id, message="Missing artist id. Use ?id=<browseId>"
    )
    return await catalog.artist(artist)
