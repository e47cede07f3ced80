from typing import TypedDict

from hotel_reservation.reservation.domain.entity import Reservation
from hotel_reservation.reservation.domain.value_object import Client

BREAKFAST_COEFFICIENT = 1.25


class ReservationDetails(TypedDict):
    """予約の入力データ"""

    clients: list[Client]
    duration_in_days: int
    breakfast_included: bool


class ReservationFactory:
    """ホテル予約を生成するFactory"""

    def __init__(self, hotel_name: str, price_per_client: float) -> None:
        self._hotel_name = hotel_name
        self._price_per_client = price_per_client

    @property
    def hotel_name(self) -> str:
        return self._hotel_name

    @property
    def price_per_client(self) -> float:
        return self._price_per_client

    def create(self, reservation_id: int, details: ReservationDetails) -> Reservation:
        """新規予約のエンティティを作成する"""
        clients = details["clients"]
        duration = details["duration_in_days"]
        breakfast_included = details["breakfast_included"]

        return Reservation(
            id=reservation_id,
            hotel_name=self._hotel_name,
            clients=clients,
            duration=duration,
            price=self.calculate_price(len(clients), duration, breakfast_included),
            breakfast_included=breakfast_included,
        )

    def calculate_price(
        self, total_clients: int, days: int, breakfast_included: bool
    ) -> float:
        """人数 × 1人1泊料金 × 日数 × (朝食付きなら 1.25)"""
        coefficient = BREAKFAST_COEFFICIENT if breakfast_included else 1.0
        return float(total_clients) * self._price_per_client * float(days) * coefficient
