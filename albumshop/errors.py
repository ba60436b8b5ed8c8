"""
Common Errors

Error messages and exception types shared by the album API and the cart.
"""

# Album errors
ERROR_ALBUM_NOT_FOUND = "Album not found"
ERROR_INVALID_ALBUM = "Invalid album payload"

# Cart errors
ERROR_CART_STORAGE = "Cart storage unavailable"


class AlbumShopError(Exception):
    """Base class for domain errors. ``message`` is safe to return to clients."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(AlbumShopError):
    """Unknown album id on get/update/delete (HTTP 404)."""

    def __init__(self, message: str = ERROR_ALBUM_NOT_FOUND) -> None:
        super().__init__(message)


class InvalidInputError(AlbumShopError):
    """Missing or malformed album payload (HTTP 400)."""

    def __init__(self, message: str = ERROR_INVALID_ALBUM) -> None:
        super().__init__(message)


class PersistenceError(AlbumShopError):
    """Key-value storage read/write failure. Recovered inside the cart store."""

    def __init__(self, message: str = ERROR_CART_STORAGE) -> None:
        super().__init__(message)
