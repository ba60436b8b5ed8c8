"""Album service: validation and CRUD over an AlbumStore."""
from dataclasses import replace
from typing import Any, List, Mapping

from albumshop.errors import InvalidInputError, NotFoundError
from albumshop.logging import get_logger, sanitize_string_for_logging
from .models import TEXT_FIELDS, Album, is_non_empty_str, is_price
from .store import AlbumStore

logger = get_logger(__name__)

UPDATABLE_FIELDS = ("title", "artist", "price", "image_url")


class AlbumService:
    """
    Operations exposed by the album API.

    Raises NotFoundError for unknown ids and InvalidInputError for bad
    payloads; the HTTP layer maps these to 404 and 400.
    """

    def __init__(self, store: AlbumStore) -> None:
        self.store = store

    def list_albums(self) -> List[Album]:
        return self.store.list()

    def get_album(self, album_id: int) -> Album:
        album = self.store.get(album_id)
        if album is None:
            raise NotFoundError()
        return album

    def create_album(self, payload: Any) -> Album:
        """Validate a full payload and append a new album with the next id."""
        if not isinstance(payload, Mapping):
            raise InvalidInputError()
        if not all(is_non_empty_str(payload.get(field)) for field in TEXT_FIELDS):
            raise InvalidInputError()
        if not is_price(payload.get("price")):
            raise InvalidInputError()

        album = Album(
            id=self.store.next_id(),
            title=payload["title"],
            artist=payload["artist"],
            price=payload["price"],
            image_url=payload["image_url"],
        )
        self.store.add(album)
        logger.info(
            f"Album {album.id} created: {sanitize_string_for_logging(album.title)}"
        )
        return album

    def update_album(self, album_id: int, payload: Any) -> Album:
        """
        Overwrite the fields present in ``payload``.

        Missing or null fields keep their previous values and ``id`` is
        never changed, even if the payload carries one. A payload that isn't
        an object carries no fields, so the album comes back unchanged.
        Empty strings are stored as given; only wrongly typed values fail.
        """
        existing = self.get_album(album_id)
        if not isinstance(payload, Mapping):
            payload = {}

        changes = {
            field: payload[field]
            for field in UPDATABLE_FIELDS
            if payload.get(field) is not None
        }
        for field, value in changes.items():
            valid = is_price(value) if field == "price" else isinstance(value, str)
            if not valid:
                raise InvalidInputError()

        updated = replace(existing, **changes)
        self.store.replace(updated)
        logger.info(f"Album {album_id} updated: {sorted(changes)}")
        return updated

    def delete_album(self, album_id: int) -> None:
        if not self.store.remove(album_id):
            raise NotFoundError()
        logger.info(f"Album {album_id} deleted")
