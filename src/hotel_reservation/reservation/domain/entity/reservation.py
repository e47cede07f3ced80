from dataclasses import dataclass

from hotel_reservation.reservation.domain.value_object import Client


@dataclass(frozen=True)
class Reservation:
    """ホテル予約

    生成後は変更されない。料金は生成時に確定する。
    全属性の一致で等価とみなす。
    """

    id: int
    hotel_name: str
    clients: tuple[Client, ...]
    duration: int
    price: float
    breakfast_included: bool

    def __post_init__(self) -> None:
        object.__setattr__(self, "clients", tuple(self.clients))

    def has_client(self, client: Client) -> bool:
        """顧客がこの予約に含まれているか"""
        return client in self.clients
