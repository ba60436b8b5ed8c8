"""
API Pydantic Models

Response and request models shared by the routers.
"""
from typing import List

from pydantic import BaseModel, Field


# ==================== ALBUM MODELS ====================

class AlbumResponse(BaseModel):
    id: int
    title: str
    artist: str
    price: float
    image_url: str


class MessageResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str


# ==================== CART MODELS ====================

class AddToCartRequest(BaseModel):
    album_id: int


class CartLineResponse(BaseModel):
    album_id: int
    title: str
    artist: str
    qty: int
    unit_price: float
    line_total: float


class CartResponse(BaseModel):
    is_empty: bool
    count: int
    total: float
    items: List[CartLineResponse] = Field(default_factory=list)
