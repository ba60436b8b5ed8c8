"""Album model and field checks."""
import math
from dataclasses import dataclass, asdict
from typing import Any

TEXT_FIELDS = ("title", "artist", "image_url")


def is_non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def is_price(value: Any) -> bool:
    """Finite, non-negative int or float."""
    # bool is an int subclass but never a price
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value >= 0


def is_album_id(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1


@dataclass
class Album:
    """Catalog record. ``id`` is assigned by the store and never changes."""
    id: int
    title: str
    artist: str
    price: float
    image_url: str

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Album":
        """
        Create from dictionary.

        Raises KeyError for missing fields and ValueError for fields of the
        wrong type, so persisted data can't smuggle in a bad album.
        """
        if not is_album_id(data["id"]):
            raise ValueError(f"invalid album id: {data['id']!r}")
        for field in TEXT_FIELDS:
            if not isinstance(data[field], str):
                raise ValueError(f"invalid album {field}: {data[field]!r}")
        if not is_price(data["price"]):
            raise ValueError(f"invalid album price: {data['price']!r}")
        return cls(
            id=data["id"],
            title=data["title"],
            artist=data["artist"],
            price=data["price"],
            image_url=data["image_url"],
        )
