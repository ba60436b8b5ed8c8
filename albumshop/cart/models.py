"""Cart models with Decimal-based pricing."""
import json
from dataclasses import dataclass
from decimal import Decimal
from typing import List

from albumshop.albums.models import Album
from albumshop.money import multiply


@dataclass
class CartItem:
    """Single cart line: an album snapshot and how many of it."""
    album: Album
    qty: int = 1

    @property
    def line_total(self) -> Decimal:
        """Price for all units, using the snapshotted album price."""
        return multiply(self.album.price, self.qty)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"album": self.album.to_dict(), "qty": self.qty}

    @classmethod
    def from_dict(cls, data: dict) -> "CartItem":
        """Create from dictionary."""
        qty = data["qty"]
        if isinstance(qty, bool) or not isinstance(qty, int) or qty < 1:
            raise ValueError(f"qty must be a positive integer, got {qty!r}")
        return cls(album=Album.from_dict(data["album"]), qty=qty)


def dump_items(items: List[CartItem]) -> str:
    """Serialize cart lines to the persisted JSON array."""
    return json.dumps([item.to_dict() for item in items])


def load_items(raw: str) -> List[CartItem]:
    """
    Parse the persisted JSON array.

    Raises ValueError, KeyError or TypeError on malformed data, including
    two lines for the same album.
    """
    data = json.loads(raw)
    if not isinstance(data, list):
        raise TypeError(f"cart payload must be a list, got {type(data).__name__}")
    items = [CartItem.from_dict(entry) for entry in data]
    album_ids = [item.album.id for item in items]
    if len(set(album_ids)) != len(album_ids):
        raise ValueError(f"duplicate album ids in cart: {album_ids}")
    return items
