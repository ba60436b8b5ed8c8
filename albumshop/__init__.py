"""
Album Shop Core Module

This package contains:
- albums: in-memory album catalog (store + service)
- cart: shopping cart store with key-value persistence
- routers: FastAPI routers for the album API
- db: Upstash Redis client for cart persistence
- money: Decimal helpers for prices

Note: Imports are lazy to keep module loading cheap in serverless environments.
"""

__all__ = [
    "AlbumService",
    "AlbumStore",
    "CartStore",
    "get_cart_store",
]


def __getattr__(name):
    """Lazy attribute access for clean serverless loading."""
    if name == "AlbumService":
        from albumshop.albums import AlbumService
        return AlbumService
    elif name == "AlbumStore":
        from albumshop.albums import AlbumStore
        return AlbumStore
    elif name == "CartStore":
        from albumshop.cart import CartStore
        return CartStore
    elif name == "get_cart_store":
        from albumshop.cart import get_cart_store
        return get_cart_store
    raise AttributeError(f"module 'albumshop' has no attribute '{name}'")
