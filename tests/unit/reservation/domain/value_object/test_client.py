from dataclasses import FrozenInstanceError

import pytest

from hotel_reservation.reservation.domain.value_object import Client


class TestClient:
    def test_create_client(self):
        client = Client(name="Goku", age=28, height_in_cm=175)
        assert client.name == "Goku"
        assert client.age == 28
        assert client.height_in_cm == 175

    def test_clients_with_same_attributes_are_equal(self):
        """全属性が一致すれば同一の顧客とみなされる"""
        assert Client("Goku", 28, 175) == Client("Goku", 28, 175)

    def test_clients_differing_in_one_attribute_are_not_equal(self):
        goku = Client("Goku", 28, 175)
        assert goku != Client("Goku", 29, 175)
        assert goku != Client("Goku", 28, 176)
        assert goku != Client("Kakarot", 28, 175)

    def test_client_is_immutable(self):
        client = Client("Goku", 28, 175)
        with pytest.raises(FrozenInstanceError):
            client.age = 30

    def test_client_is_hashable(self):
        assert len({Client("Goku", 28, 175), Client("Goku", 28, 175)}) == 1
