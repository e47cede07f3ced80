from hotel_reservation.reservation.domain.entity import Reservation
from hotel_reservation.reservation.domain.exception import ReservationNotFoundError
from hotel_reservation.reservation.domain.repository import ReservationRepository


class InMemoryReservationRepository(ReservationRepository):
    """リストで予約を保持する ReservationRepository の具象実装

    追加順を保持する。プロセス終了で内容は失われる。
    """

    def __init__(self) -> None:
        self._reservations: list[Reservation] = []

    def save(self, reservation: Reservation) -> None:
        self._reservations.append(reservation)

    def find_by_id(self, reservation_id: int) -> Reservation | None:
        for reservation in self._reservations:
            if reservation.id == reservation_id:
                return reservation
        return None

    def find_all(self) -> list[Reservation]:
        return list(self._reservations)

    def delete(self, reservation_id: int) -> None:
        for index, reservation in enumerate(self._reservations):
            if reservation.id == reservation_id:
                del self._reservations[index]
                return
        raise ReservationNotFoundError(reservation_id)
