"""Pytest configuration and fixtures"""
import os
import pytest
from unittest.mock import Mock

# Keep the cart singleton off Redis during tests
os.environ.pop("UPSTASH_REDIS_REST_URL", None)
os.environ.pop("UPSTASH_REDIS_REST_TOKEN", None)

from albumshop.albums import Album, AlbumService, AlbumStore
from albumshop.cart import CartStore, InMemoryStorage


@pytest.fixture
def album_store():
    """Fresh seeded album store"""
    return AlbumStore()


@pytest.fixture
def album_service(album_store):
    """Album service over a fresh store"""
    return AlbumService(album_store)


@pytest.fixture
def sample_album_payload():
    """Valid create payload"""
    return {
        "title": "New Album",
        "artist": "Tester",
        "price": 9.99,
        "image_url": "http://x"
    }


@pytest.fixture
def album_one():
    """Cart test album priced 10.99"""
    return Album(
        id=1,
        title="Test Album 1",
        artist="Test Artist 1",
        price=10.99,
        image_url="http://test.com/image1.jpg"
    )


@pytest.fixture
def album_two():
    """Cart test album priced 15.99"""
    return Album(
        id=2,
        title="Test Album 2",
        artist="Test Artist 2",
        price=15.99,
        image_url="http://test.com/image2.jpg"
    )


@pytest.fixture
def memory_storage():
    """Empty in-memory key-value storage"""
    return InMemoryStorage()


@pytest.fixture
def cart(memory_storage):
    """Empty cart over in-memory storage"""
    return CartStore(memory_storage)


@pytest.fixture
def failing_storage():
    """Storage whose reads and writes always raise"""
    storage = Mock()
    storage.get.side_effect = ConnectionError("storage down")
    storage.set.side_effect = ConnectionError("storage down")
    return storage
