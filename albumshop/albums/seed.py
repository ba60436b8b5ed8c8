"""Initial album catalog loaded into every new store."""
from typing import List

from .models import Album

SEED_ALBUMS = (
    {
        "id": 1,
        "title": "You, Me and an App Id",
        "artist": "Daprize",
        "price": 10.99,
        "image_url": "https://aka.ms/albums-daprlogo",
    },
    {
        "id": 2,
        "title": "Seven Revision Army",
        "artist": "The Blue-Green Stripes",
        "price": 13.99,
        "image_url": "https://aka.ms/albums-containerappslogo",
    },
    {
        "id": 3,
        "title": "Scale It Up",
        "artist": "KEDA Club",
        "price": 13.99,
        "image_url": "https://aka.ms/albums-kedalogo",
    },
    {
        "id": 4,
        "title": "Lost in Translation",
        "artist": "MegaDNS",
        "price": 12.99,
        "image_url": "https://aka.ms/albums-envoylogo",
    },
    {
        "id": 5,
        "title": "Lock Down Your Love",
        "artist": "V is for VNET",
        "price": 12.99,
        "image_url": "https://aka.ms/albums-vnetlogo",
    },
    {
        "id": 6,
        "title": "Sweet Container O' Mine",
        "artist": "Guns N Probeses",
        "price": 14.99,
        "image_url": "https://aka.ms/albums-containerappslogo",
    },
)


def seed_albums() -> List[Album]:
    """Fresh Album objects for the initial catalog."""
    return [Album.from_dict(data) for data in SEED_ALBUMS]
