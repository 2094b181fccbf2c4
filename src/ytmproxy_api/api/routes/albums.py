"""Album API endpoints."""

from fastapi import APIRouter, Query, status

from ytmproxy_api.api.deps import CatalogDep
from ytmproxy_api.api.params import require
from ytmproxy_api.schemas.catalog import AlbumResponse

router = APIRouter(tags=["albums"])


@router.get("/album", status_code=status.HTTP_200_OK)
async def get_album(
    catalog: CatalogDep,
    id_: str | None = Query(None, alias="id", description="Album browse ID"),
    album_id: str | None = Query(None, alias="albumId"),
    browse_id: str | None = Query(None, alias="browseId"),
) -> AlbumResponse:
    """Get album details and tracks by browse ID."""
    album = require(
        id_, album_id, browse_id, message="Missing album id. Use ?id=<browseId>"
    )
    return await catalog.album(album)
