"""Cart store with key-value persistence."""
from dataclasses import replace
from decimal import Decimal
from typing import List, Optional

from albumshop.albums.models import Album
from albumshop.db import RedisKeys, redis_configured
from albumshop.logging import get_logger
from albumshop.money import round_money, to_float
from .models import CartItem, dump_items, load_items
from .storage import InMemoryStorage, KeyValueStorage, RedisStorage

logger = get_logger(__name__)


class CartStore:
    """
    Shopping cart persisted to key-value storage.

    - One line per album id; adding the same album again bumps its qty
    - Albums are copied on add, later catalog edits don't reach the cart
    - Every mutation rewrites storage synchronously
    - Storage failures are logged, never raised
    """

    def __init__(self, storage: KeyValueStorage, key: str = RedisKeys.CART) -> None:
        self.storage = storage
        self.key = key
        self._items: List[CartItem] = self._load()

    @property
    def items(self) -> List[CartItem]:
        """Current cart lines in insertion order."""
        return list(self._items)

    @property
    def count(self) -> int:
        """Total number of units in the cart."""
        return sum(item.qty for item in self._items)

    @property
    def total(self) -> Decimal:
        """Sum of price x qty over all lines, rounded to cents."""
        return round_money(sum((item.line_total for item in self._items), Decimal("0")))

    def add(self, album: Album) -> CartItem:
        existing = self._find(album.id)
        if existing is not None:
            existing.qty += 1
            item = existing
        else:
            item = CartItem(album=replace(album), qty=1)
            self._items.append(item)
        self._save()
        return item

    def remove(self, album_id: int) -> bool:
        """Drop the line for ``album_id``. Returns False if it wasn't there."""
        item = self._find(album_id)
        if item is None:
            return False
        self._items.remove(item)
        self._save()
        return True

    def clear(self) -> None:
        self._items = []
        self._save()

    def summary(self) -> dict:
        """Plain-dict view of the cart for JSON responses."""
        if not self._items:
            return {"is_empty": True, "count": 0, "total": 0.0, "items": []}

        return {
            "is_empty": False,
            "count": self.count,
            "total": to_float(self.total),
            "items": [
                {
                    "album_id": item.album.id,
                    "title": item.album.title,
                    "artist": item.album.artist,
                    "qty": item.qty,
                    "unit_price": to_float(item.album.price),
                    "line_total": to_float(item.line_total),
                }
                for item in self._items
            ],
        }

    def _find(self, album_id: int) -> Optional[CartItem]:
        return next((item for item in self._items if item.album.id == album_id), None)

    def _load(self) -> List[CartItem]:
        try:
            raw = self.storage.get(self.key)
        except Exception as e:
            logger.warning(f"Failed to read cart from storage, starting empty: {e}")
            return []

        if not raw:
            return []

        try:
            return load_items(raw)
        except (ValueError, KeyError, TypeError) as e:
            # Corrupted data - start with an empty cart
            logger.warning(f"Corrupted cart data under {self.key}: {e}")
            return []

    def _save(self) -> None:
        try:
            self.storage.set(self.key, dump_items(self._items))
        except Exception as e:
            logger.error(f"Failed to save cart to storage: {e}")


# Singleton instance
_cart_store: Optional[CartStore] = None


def get_cart_store() -> CartStore:
    """Get CartStore singleton, backed by Redis when Upstash is configured."""
    global _cart_store
    if _cart_store is None:
        if redis_configured():
            storage = RedisStorage()
        else:
            logger.warning("Upstash Redis not configured, cart will not survive restarts")
            storage = InMemoryStorage()
        _cart_store = CartStore(storage)
    return _cart_store
