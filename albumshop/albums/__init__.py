"""Albums package: model, in-memory store, and service."""
from .models import Album
from .store import AlbumStore
from .service import AlbumService

__all__ = [
    "Album",
    "AlbumStore",
    "AlbumService",
]
