"""
Albums API Router

CRUD endpoints over the in-memory album catalog. Domain errors raised by
the service are turned into {"message": ...} responses by the handlers
registered in api/index.py.
"""

from typing import Any, List

from fastapi import APIRouter, Depends, Request, Response, status

from albumshop.albums import Album, AlbumService
from albumshop.errors import InvalidInputError, NotFoundError
from albumshop.logging import get_logger
from .deps import get_album_service
from .models import AlbumResponse, MessageResponse

logger = get_logger(__name__)

router = APIRouter(tags=["albums"])

ERROR_RESPONSES = {
    status.HTTP_404_NOT_FOUND: {"model": MessageResponse},
}


def _parse_album_id(raw: str) -> int:
    """Path ids that aren't integers can't match any album."""
    try:
        return int(raw)
    except ValueError:
        raise NotFoundError() from None


async def _read_json(request: Request, empty: Any = None) -> Any:
    """Parsed JSON body. A blank body gives ``empty`` when one is supplied."""
    if empty is not None and not (await request.body()).strip():
        return empty
    try:
        return await request.json()
    except ValueError as e:
        logger.warning(f"Unparseable album payload: {e}")
        raise InvalidInputError() from e


def _to_response(album: Album) -> dict:
    return album.to_dict()


@router.get("", response_model=List[AlbumResponse])
async def list_albums(service: AlbumService = Depends(get_album_service)):
    """List all albums."""
    return [_to_response(album) for album in service.list_albums()]


@router.get("/{album_id}", response_model=AlbumResponse, responses=ERROR_RESPONSES)
async def get_album(album_id: str, service: AlbumService = Depends(get_album_service)):
    """Get one album."""
    return _to_response(service.get_album(_parse_album_id(album_id)))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=AlbumResponse,
    responses={status.HTTP_400_BAD_REQUEST: {"model": MessageResponse}},
)
async def create_album(request: Request, service: AlbumService = Depends(get_album_service)):
    """Create an album. title, artist, image_url and price are required."""
    payload = await _read_json(request)
    return _to_response(service.create_album(payload))


@router.put(
    "/{album_id}",
    response_model=AlbumResponse,
    responses={**ERROR_RESPONSES, status.HTTP_400_BAD_REQUEST: {"model": MessageResponse}},
)
async def update_album(
    album_id: str,
    request: Request,
    service: AlbumService = Depends(get_album_service),
):
    """Update the given fields of an album."""
    parsed_id = _parse_album_id(album_id)
    # 404 takes precedence over a bad body
    service.get_album(parsed_id)
    payload = await _read_json(request, empty={})
    return _to_response(service.update_album(parsed_id, payload))


@router.delete(
    "/{album_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=ERROR_RESPONSES,
)
async def delete_album(album_id: str, service: AlbumService = Depends(get_album_service)):
    """Delete an album."""
    service.delete_album(_parse_album_id(album_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
