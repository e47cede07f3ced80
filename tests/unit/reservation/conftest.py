from unittest.mock import MagicMock

import pytest

from hotel_reservation.reservation.applications import ReservationManager
from hotel_reservation.reservation.domain.entity import Reservation
from hotel_reservation.reservation.domain.value_object import Client


@pytest.fixture
def goku():
    return Client(name="Goku", age=28, height_in_cm=175)


@pytest.fixture
def krillin():
    return Client(name="Krillin", age=29, height_in_cm=155)


@pytest.fixture
def piccolo():
    return Client(name="Piccolo", age=10, height_in_cm=190)


@pytest.fixture
def vegeta():
    return Client(name="Vegeta", age=32, height_in_cm=180)


@pytest.fixture
def manager():
    """デフォルト設定の ReservationManager フィクスチャ"""
    return ReservationManager()


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    repository = MagicMock()
    repository.find_all.return_value = []
    return repository


@pytest.fixture
def create_reservation(goku):
    """Reservation を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        reservation_id: int = 1,
        hotel_name: str = "Hotel Luchadores",
        clients: list[Client] | None = None,
        duration: int = 3,
        price: float = 60.0,
        breakfast_included: bool = False,
    ) -> Reservation:
        return Reservation(
            id=reservation_id,
            hotel_name=hotel_name,
            clients=clients if clients is not None else [goku],
            duration=duration,
            price=price,
            breakfast_included=breakfast_included,
        )

    return _factory
