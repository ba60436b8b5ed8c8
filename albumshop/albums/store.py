"""In-memory album store."""
from dataclasses import replace
from typing import Iterable, List, Optional

from .models import Album
from .seed import seed_albums


class AlbumStore:
    """
    Ordered, process-local collection of albums.

    Created once per application (or per test) and handed to the service;
    contents are lost when the process exits.
    """

    def __init__(self, albums: Optional[Iterable[Album]] = None) -> None:
        if albums is None:
            albums = seed_albums()
        self._albums: List[Album] = [replace(album) for album in albums]

    def __len__(self) -> int:
        return len(self._albums)

    def list(self) -> List[Album]:
        """All albums in insertion order."""
        return list(self._albums)

    def get(self, album_id: int) -> Optional[Album]:
        return next((album for album in self._albums if album.id == album_id), None)

    def next_id(self) -> int:
        """Max existing id + 1, or 1 when empty. Not a separate counter."""
        return max((album.id for album in self._albums), default=0) + 1

    def add(self, album: Album) -> Album:
        self._albums.append(album)
        return album

    def replace(self, album: Album) -> bool:
        """Swap the stored album with the same id, keeping its position."""
        for index, existing in enumerate(self._albums):
            if existing.id == album.id:
                self._albums[index] = album
                return True
        return False

    def remove(self, album_id: int) -> bool:
        for index, existing in enumerate(self._albums):
            if existing.id == album_id:
                del self._albums[index]
                return True
        return False
