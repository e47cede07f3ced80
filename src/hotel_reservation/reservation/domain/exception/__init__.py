from .reservation_errors import (
    DuplicateClientError,
    DuplicateIdError,
    ReservationError,
    ReservationNotFoundError,
)

__all__ = [
    "ReservationError",
    "DuplicateIdError",
    "DuplicateClientError",
    "ReservationNotFoundError",
]
