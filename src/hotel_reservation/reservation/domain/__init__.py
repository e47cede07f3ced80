from .entity import Reservation
from .enum import ReservationErrorKind
from .exception import (
    DuplicateClientError,
    DuplicateIdError,
    ReservationError,
    ReservationNotFoundError,
)
from .factory import ReservationDetails, ReservationFactory, ReservationIdCounter
from .repository import ReservationRepository
from .value_object import Client

__all__ = [
    "Client",
    "Reservation",
    "ReservationErrorKind",
    "ReservationError",
    "DuplicateIdError",
    "DuplicateClientError",
    "ReservationNotFoundError",
    "ReservationDetails",
    "ReservationFactory",
    "ReservationIdCounter",
    "ReservationRepository",
]
