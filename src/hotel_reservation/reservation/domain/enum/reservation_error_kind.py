from enum import Enum


class ReservationErrorKind(str, Enum):
    """予約エラーの種別"""

    DUPLICATE_ID = "DUPLICATE_ID"
    DUPLICATE_CLIENT = "DUPLICATE_CLIENT"
    RESERVATION_NOT_FOUND = "RESERVATION_NOT_FOUND"
