from abc import abstractmethod

from hotel_reservation.reservation.domain.entity import Reservation
from hotel_reservation.shared.domain import Repository


class ReservationRepository(Repository[Reservation, int]):
    """有効な予約を保持するレポジトリのインターフェース"""

    @abstractmethod
    def save(self, reservation: Reservation) -> None:
        """予約を末尾に追加する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, reservation_id: int) -> Reservation | None:
        """予約IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Reservation]:
        """追加順に全件を返す"""
        raise NotImplementedError

    @abstractmethod
    def delete(self, reservation_id: int) -> None:
        """予約を削除する"""
        raise NotImplementedError
