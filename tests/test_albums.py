"""
Tests for the album store and service
"""

import pytest

from albumshop.albums import Album, AlbumService, AlbumStore
from albumshop.errors import InvalidInputError, NotFoundError


class TestAlbumStore:
    """Tests for AlbumStore."""

    def test_seeded_with_six_albums(self, album_store):
        """New stores start from the fixed catalog."""
        albums = album_store.list()

        assert len(albums) == 6
        assert [album.id for album in albums] == [1, 2, 3, 4, 5, 6]

    def test_stores_do_not_share_state(self):
        """Each store owns its own list."""
        first = AlbumStore()
        second = AlbumStore()

        first.remove(1)

        assert len(first) == 5
        assert len(second) == 6
        assert second.get(1) is not None

    def test_next_id_on_empty_store(self):
        """Empty store allocates id 1."""
        assert AlbumStore(albums=[]).next_id() == 1

    def test_next_id_uses_max_not_count(self):
        """Next id follows the highest id, not the number of albums."""
        store = AlbumStore(albums=[
            Album(id=3, title="A", artist="A", price=1, image_url="x"),
            Album(id=10, title="B", artist="B", price=1, image_url="x"),
        ])

        assert store.next_id() == 11

    def test_replace_keeps_position(self, album_store):
        """Replacing an album leaves ordering untouched."""
        original = album_store.get(3)
        updated = Album(
            id=3,
            title="Changed",
            artist=original.artist,
            price=original.price,
            image_url=original.image_url
        )

        assert album_store.replace(updated) is True
        assert album_store.list()[2].title == "Changed"

    def test_remove_missing(self, album_store):
        """Removing an unknown id reports False."""
        assert album_store.remove(999) is False
        assert len(album_store) == 6


class TestCreateAlbum:
    """Tests for AlbumService.create_album."""

    def test_create_assigns_next_id(self, album_service, sample_album_payload):
        """First created album after the seed gets id 7."""
        album = album_service.create_album(sample_album_payload)

        assert album.id == 7
        assert album.title == "New Album"
        assert album.artist == "Tester"
        assert album.price == 9.99
        assert album.image_url == "http://x"

    def test_create_grows_list_by_one(self, album_service, sample_album_payload):
        """List length increases by exactly one and get returns the album."""
        before = len(album_service.list_albums())

        album = album_service.create_album(sample_album_payload)

        assert len(album_service.list_albums()) == before + 1
        assert album_service.get_album(album.id) == album
        assert album_service.list_albums()[-1] == album

    def test_create_accepts_integer_price(self, album_service, sample_album_payload):
        """Whole-number prices are numbers too."""
        sample_album_payload["price"] = 1

        album = album_service.create_album(sample_album_payload)

        assert album.price == 1

    @pytest.mark.parametrize("field", ["title", "artist", "image_url", "price"])
    def test_create_missing_field(self, album_service, sample_album_payload, field):
        """Every field is required."""
        del sample_album_payload[field]

        with pytest.raises(InvalidInputError):
            album_service.create_album(sample_album_payload)

    @pytest.mark.parametrize("field", ["title", "artist", "image_url"])
    def test_create_empty_text_field(self, album_service, sample_album_payload, field):
        """Empty strings don't count as present."""
        sample_album_payload[field] = ""

        with pytest.raises(InvalidInputError):
            album_service.create_album(sample_album_payload)

    @pytest.mark.parametrize("price", ["9.99", None, True, -1, float("nan")])
    def test_create_bad_price(self, album_service, sample_album_payload, price):
        """Price must be a non-negative number."""
        sample_album_payload["price"] = price

        with pytest.raises(InvalidInputError):
            album_service.create_album(sample_album_payload)

    def test_create_non_object_payload(self, album_service):
        """Arrays and scalars are rejected."""
        with pytest.raises(InvalidInputError):
            album_service.create_album(["New Album"])

    def test_failed_create_leaves_store_alone(self, album_service):
        """Invalid payloads don't consume ids or add rows."""
        with pytest.raises(InvalidInputError):
            album_service.create_album({"title": "Only title"})

        assert len(album_service.list_albums()) == 6
        assert album_service.store.next_id() == 7


class TestUpdateAlbum:
    """Tests for AlbumService.update_album."""

    def test_partial_update(self, album_service):
        """Unspecified fields keep their values."""
        before = album_service.get_album(2)

        updated = album_service.update_album(2, {"title": "Updated"})

        assert updated.title == "Updated"
        assert updated.artist == before.artist
        assert updated.price == before.price
        assert updated.image_url == before.image_url
        assert album_service.get_album(2) == updated

    def test_update_never_changes_id(self, album_service):
        """An id in the payload is ignored."""
        updated = album_service.update_album(2, {"id": 99, "price": 5})

        assert updated.id == 2
        assert updated.price == 5
        with pytest.raises(NotFoundError):
            album_service.get_album(99)

    def test_null_fields_keep_values(self, album_service):
        """null behaves like an absent field."""
        before = album_service.get_album(4)

        updated = album_service.update_album(4, {"title": None, "artist": "New Artist"})

        assert updated.title == before.title
        assert updated.artist == "New Artist"

    def test_update_missing_album(self, album_service):
        """Unknown id raises NotFoundError."""
        with pytest.raises(NotFoundError):
            album_service.update_album(999, {"title": "Nope"})

    def test_update_bad_price(self, album_service):
        """Provided fields must have the right type."""
        with pytest.raises(InvalidInputError):
            album_service.update_album(1, {"price": "free"})

        assert album_service.get_album(1).price == 10.99

    def test_update_bad_title_type(self, album_service):
        """Non-string text fields are rejected."""
        with pytest.raises(InvalidInputError):
            album_service.update_album(1, {"title": 123})

    def test_update_stores_empty_string(self, album_service):
        """Empty strings are a value, not an absent field."""
        updated = album_service.update_album(1, {"title": ""})

        assert updated.title == ""
        assert album_service.get_album(1).title == ""

    @pytest.mark.parametrize("payload", [{}, [], "text", 5])
    def test_update_without_fields(self, album_service, payload):
        """Payloads carrying no fields leave the album unchanged."""
        before = album_service.get_album(5)

        updated = album_service.update_album(5, payload)

        assert updated == before


class TestAlbumModel:
    """Tests for Album.from_dict type checks."""

    def test_from_dict(self):
        """Well-formed data loads."""
        album = Album.from_dict(
            {"id": 3, "title": "T", "artist": "A", "price": 1, "image_url": "x"}
        )

        assert album == Album(id=3, title="T", artist="A", price=1, image_url="x")

    @pytest.mark.parametrize("field,value", [
        ("id", "3"),
        ("id", 0),
        ("id", False),
        ("title", 123),
        ("artist", None),
        ("image_url", ["x"]),
        ("price", "abc"),
        ("price", -0.5),
        ("price", True),
    ])
    def test_from_dict_rejects_wrong_types(self, field, value):
        """Wrongly typed fields raise ValueError."""
        data = {"id": 3, "title": "T", "artist": "A", "price": 1, "image_url": "x"}
        data[field] = value

        with pytest.raises(ValueError):
            Album.from_dict(data)


class TestDeleteAlbum:
    """Tests for AlbumService.delete_album."""

    def test_delete_then_get(self, album_service):
        """Deleted albums are gone."""
        album_service.delete_album(3)

        with pytest.raises(NotFoundError):
            album_service.get_album(3)

    def test_delete_missing(self, album_service):
        """Unknown id raises NotFoundError."""
        with pytest.raises(NotFoundError):
            album_service.delete_album(999)

    def test_deleting_max_id_reuses_it(self, album_service, sample_album_payload):
        """Ids are derived from current contents, so the top id comes back."""
        created = album_service.create_album(sample_album_payload)
        album_service.delete_album(created.id)

        again = album_service.create_album(sample_album_payload)

        assert again.id == created.id == 7

    def test_create_delete_scenario(self, album_service, sample_album_payload):
        """Create gives id 7; deleting it restores the six seeded albums."""
        created = album_service.create_album(sample_album_payload)
        assert created.id == 7

        album_service.delete_album(7)

        albums = album_service.list_albums()
        assert len(albums) == 6
        assert [album.id for album in albums] == [1, 2, 3, 4, 5, 6]


def test_service_on_empty_store(sample_album_payload):
    """First album in an empty store gets id 1."""
    service = AlbumService(AlbumStore(albums=[]))

    assert service.list_albums() == []
    assert service.create_album(sample_album_payload).id == 1
