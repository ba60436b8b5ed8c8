"""
Shared Dependencies for Routers

The album service is owned by the application (created in the lifespan
handler); the cart store is a lazy process-wide singleton.
"""

from fastapi import Request

from albumshop.albums import AlbumService
from albumshop.cart import CartStore, get_cart_store


def get_album_service(request: Request) -> AlbumService:
    """Album service attached to the running app."""
    return request.app.state.album_service


def get_cart() -> CartStore:
    """Get CartStore singleton (overridden in tests)."""
    return get_cart_store()
