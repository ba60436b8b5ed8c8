"""Cart package: models, storage, and cart store."""
from .models import CartItem
from .storage import InMemoryStorage, KeyValueStorage, RedisStorage
from .service import CartStore, get_cart_store

__all__ = [
    "CartItem",
    "CartStore",
    "InMemoryStorage",
    "KeyValueStorage",
    "RedisStorage",
    "get_cart_store",
]
