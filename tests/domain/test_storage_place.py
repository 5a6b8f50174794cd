"""Tests for the StoragePlace entity."""

import pytest

from delivery.courier.courier import StoragePlace
from delivery.shared.errors import DeliveryError, ErrorKind


class TestStoragePlaceCreation:
    def test_create(self):
        place = StoragePlace.create("Trunk", 20)
        assert place.name == "Trunk"
        assert place.total_volume == 20
        assert place.order_id is None
        assert place.is_occupied is False

    def test_empty_name_is_invalid(self):
        with pytest.raises(DeliveryError) as exc:
            StoragePlace.create("", 10)
        assert exc.value.kind is ErrorKind.INVALID_VALUE

    @pytest.mark.parametrize("volume", [0, -5])
    def test_non_positive_volume_is_invalid(self, volume):
        with pytest.raises(DeliveryError) as exc:
            StoragePlace.create("Bag", volume)
        assert exc.value.kind is ErrorKind.INVALID_VALUE


class TestCanStore:
    def test_fits(self):
        place = StoragePlace.create("Bag", 10)
        assert place.can_store(10) is True

    def test_too_large(self):
        place = StoragePlace.create("Bag", 10)
        assert place.can_store(11) is False

    def test_occupied(self):
        place = StoragePlace.create("Bag", 10)
        place.store("ord-1", 1)
        assert place.can_store(1) is False

    def test_non_positive_volume_is_invalid(self):
        place = StoragePlace.create("Bag", 10)
        with pytest.raises(DeliveryError) as exc:
            place.can_store(0)
        assert exc.value.kind is ErrorKind.INVALID_VALUE


class TestStoreAndClear:
    def test_store_occupies(self):
        place = StoragePlace.create("Bag", 10)
        place.store("ord-1", 5)
        assert place.is_occupied is True
        assert str(place.order_id) == "ord-1"

    def test_store_twice_fails(self):
        place = StoragePlace.create("Bag", 10)
        place.store("ord-1", 5)
        with pytest.raises(DeliveryError) as exc:
            place.store("ord-2", 1)
        assert exc.value.kind is ErrorKind.OCCUPIED_OR_TOO_SMALL
        assert str(place.order_id) == "ord-1"

    def test_store_too_large_fails(self):
        place = StoragePlace.create("Bag", 10)
        with pytest.raises(DeliveryError) as exc:
            place.store("ord-1", 11)
        assert exc.value.kind is ErrorKind.OCCUPIED_OR_TOO_SMALL
        assert place.is_occupied is False

    def test_clear(self):
        place = StoragePlace.create("Bag", 10)
        place.store("ord-1", 5)
        place.clear("ord-1")
        assert place.is_occupied is False

    def test_clear_empty_fails(self):
        place = StoragePlace.create("Bag", 10)
        with pytest.raises(DeliveryError) as exc:
            place.clear("ord-1")
        assert exc.value.kind is ErrorKind.EMPTY

    def test_clear_other_order_fails(self):
        place = StoragePlace.create("Bag", 10)
        place.store("ord-1", 5)
        with pytest.raises(DeliveryError) as exc:
            place.clear("ord-2")
        assert exc.value.kind is ErrorKind.HOLDS_DIFFERENT_ORDER
        assert place.is_occupied is True
