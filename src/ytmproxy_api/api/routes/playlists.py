"""Playlist API endpoints."""

from fastapi import APIRouter, Query, status

from ytmproxy_api.api.deps import CatalogDep
from ytmproxy_api.api.params import require
from ytmproxy_api.schemas.catalog import PlaylistResponse

router = APIRouter(tags=["playlists"])


@router.get("/playlist", status_code=status.HTTP_200_OK)
async def get_playlist(
    catalog: CatalogDep,
    id_: str | None = Query(None, alias="id", description="Playlist ID"),
    playlist_id: str | None = Query(None, alias="playlistId"),
    browse_id: str | None = Query(None, alias="browseId"),
) -> PlaylistResponse:
    """Get playlist details and items."""
    playlist = require(
        id_,
        playlist_id,
        browse_id,
        message="Missing playlist id. Use ?id=<browseId>",
    )
    return await catalog.playlist(playlist)
