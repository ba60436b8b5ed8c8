"""
FastAPI Routers Package

All routers are included in api/index.py.
"""

from albumshop.routers.albums import router as albums_router
from albumshop.routers.cart import router as cart_router

__all__ = [
    "albums_router",
    "cart_router",
]
