"""
Cart Router

Shopping cart endpoints. Albums are looked up in the catalog and
snapshotted into the cart when added.
"""

from fastapi import APIRouter, Depends

from albumshop.albums import AlbumService
from albumshop.cart import CartStore
from albumshop.logging import get_logger
from .deps import get_album_service, get_cart
from .models import AddToCartRequest, CartResponse, MessageResponse

logger = get_logger(__name__)

router = APIRouter(tags=["cart"])


@router.get("", response_model=CartResponse)
async def get_cart_summary(cart: CartStore = Depends(get_cart)):
    """Get the cart with count and total."""
    return cart.summary()


@router.post("/items", response_model=CartResponse, responses={404: {"model": MessageResponse}})
async def add_to_cart(
    payload: AddToCartRequest,
    cart: CartStore = Depends(get_cart),
    service: AlbumService = Depends(get_album_service),
):
    """Add one unit of an album to the cart."""
    album = service.get_album(payload.album_id)
    item = cart.add(album)
    logger.info(f"Album {album.id} added to cart, qty={item.qty}")
    return cart.summary()


@router.delete("/items/{album_id}", response_model=CartResponse)
async def remove_from_cart(album_id: int, cart: CartStore = Depends(get_cart)):
    """Remove an album's line from the cart. Unknown ids are ignored."""
    cart.remove(album_id)
    return cart.summary()


@router.delete("", response_model=CartResponse)
async def clear_cart(cart: CartStore = Depends(get_cart)):
    """Empty the cart."""
    cart.clear()
    return cart.summary()
