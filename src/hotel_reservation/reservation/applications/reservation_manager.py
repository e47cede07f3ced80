from __future__ import annotations

from collections.abc import Iterable

from hotel_reservation.reservation.domain.entity import Reservation
from hotel_reservation.reservation.domain.exception import (
    DuplicateClientError,
    DuplicateIdError,
    ReservationNotFoundError,
)
from hotel_reservation.reservation.domain.factory import (
    ReservationDetails,
    ReservationFactory,
    ReservationIdCounter,
)
from hotel_reservation.reservation.domain.repository import ReservationRepository
from hotel_reservation.reservation.domain.value_object import Client
from hotel_reservation.reservation.infrastructure import (
    InMemoryReservationRepository,
    ReservationSettings,
)
from hotel_reservation.reservation.infrastructure import settings as default_settings
from hotel_reservation.reservation.infrastructure.config import (
    DEFAULT_HOTEL_NAME,
    DEFAULT_PRICE_PER_CLIENT,
)
from hotel_reservation.shared.utils import get_logger

logger = get_logger("reservation")


class ReservationManager:
    """ホテル予約の追加・キャンセルを行うユースケース

    シングルスレッドでの逐次呼び出しを前提とする。
    失敗時は状態を一切変更しない。
    """

    def __init__(
        self,
        hotel_name: str = DEFAULT_HOTEL_NAME,
        price_per_client: float = DEFAULT_PRICE_PER_CLIENT,
        *,
        repository: ReservationRepository | None = None,
        id_counter: ReservationIdCounter | None = None,
    ) -> None:
        self._factory = ReservationFactory(hotel_name, price_per_client)
        self._repository = (
            repository if repository is not None else InMemoryReservationRepository()
        )
        self._id_counter = (
            id_counter if id_counter is not None else ReservationIdCounter()
        )

    @classmethod
    def from_settings(
        cls, settings: ReservationSettings | None = None
    ) -> ReservationManager:
        """設定値からマネージャを生成する"""
        if settings is None:
            settings = default_settings
        return cls(settings.hotel_name, settings.price_per_client)

    @property
    def hotel_name(self) -> str:
        return self._factory.hotel_name

    @property
    def price_per_client(self) -> float:
        return self._factory.price_per_client

    def get_reservations(self) -> list[Reservation]:
        """有効な予約を追加順に返す（返り値の変更は内部状態に影響しない）"""
        return self._repository.find_all()

    def add_reservation(
        self,
        clients: Iterable[Client],
        duration_in_days: int,
        breakfast_included: bool,
    ) -> Reservation:
        """予約を追加する"""
        clients = list(clients)
        reservation_id = self._id_counter.next_id()

        if reservation_id in self._reservation_ids():
            logger.warning(
                "Rejected reservation",
                extra={
                    "reason": DuplicateIdError.kind.value,
                    "reservation_id": reservation_id,
                },
            )
            raise DuplicateIdError(reservation_id)

        if self._has_booked_client(clients):
            logger.warning(
                "Rejected reservation",
                extra={
                    "reason": DuplicateClientError.kind.value,
                    "client_count": len(clients),
                },
            )
            raise DuplicateClientError(clients)

        details: ReservationDetails = {
            "clients": clients,
            "duration_in_days": duration_in_days,
            "breakfast_included": breakfast_included,
        }
        reservation = self._factory.create(reservation_id, details)

        self._repository.save(reservation)
        self._id_counter.advance()
        logger.info(
            "Added reservation",
            extra={"reservation_id": reservation.id, "price": reservation.price},
        )
        return reservation

    def cancel_reservation(self, reservation_id: int) -> None:
        """予約をキャンセルする"""
        if self._repository.find_by_id(reservation_id) is None:
            logger.warning(
                "Rejected cancellation",
                extra={
                    "reason": ReservationNotFoundError.kind.value,
                    "reservation_id": reservation_id,
                },
            )
            raise ReservationNotFoundError(reservation_id)

        self._repository.delete(reservation_id)
        logger.info("Cancelled reservation", extra={"reservation_id": reservation_id})

    def _reservation_ids(self) -> set[int]:
        return {reservation.id for reservation in self._repository.find_all()}

    def _has_booked_client(self, clients: list[Client]) -> bool:
        return any(
            reservation.has_client(client)
            for reservation in self._repository.find_all()
            for client in clients
        )
