from collections.abc import Sequence
from typing import ClassVar

from hotel_reservation.reservation.domain.enum import ReservationErrorKind
from hotel_reservation.reservation.domain.value_object import Client
from hotel_reservation.shared.domain.exception import (
    DomainException,
    DuplicateResourceException,
    ResourceNotFoundException,
)


class ReservationError(DomainException):
    """予約操作で発生する例外の基底クラス

    種別 (kind) と付随データが等しければ等価とみなす。
    基底クラスを直接生成した場合、kind は None で付随データはメッセージ引数となる。
    """

    kind: ClassVar[ReservationErrorKind | None] = None

    def _payload(self) -> object:
        return self.args

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReservationError):
            return NotImplemented
        return self.kind == other.kind and self._payload() == other._payload()

    def __hash__(self) -> int:
        return hash((self.kind, self._payload()))


class DuplicateIdError(ReservationError, DuplicateResourceException):
    """採番した予約IDが既に有効な予約に使われている場合"""

    kind = ReservationErrorKind.DUPLICATE_ID

    def __init__(self, reservation_id: int) -> None:
        self.reservation_id = reservation_id
        super().__init__(f"Reservation with id {reservation_id} already exists")

    def _payload(self) -> object:
        return self.reservation_id


class DuplicateClientError(ReservationError, DuplicateResourceException):
    """追加しようとした顧客の誰かが既に有効な予約を持っている場合

    重複した顧客だけでなく、リクエストされた顧客リスト全体を保持する。
    """

    kind = ReservationErrorKind.DUPLICATE_CLIENT

    def __init__(self, clients: Sequence[Client]) -> None:
        self.clients = tuple(clients)
        super().__init__(
            "There is already a reservation for a client you want to add "
            f"from list: {list(self.clients)}"
        )

    def _payload(self) -> object:
        return self.clients


class ReservationNotFoundError(ReservationError, ResourceNotFoundException):
    """キャンセル対象の予約が存在しない場合"""

    kind = ReservationErrorKind.RESERVATION_NOT_FOUND

    def __init__(self, reservation_id: int) -> None:
        self.reservation_id = reservation_id
        super().__init__(
            f"Cannot cancel a reservation with id {reservation_id} "
            "because it does not exist"
        )

    def _payload(self) -> object:
        return self.reservation_id
