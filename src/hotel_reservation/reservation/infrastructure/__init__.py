from .config import ReservationSettings as ReservationSettings
from .config import settings as settings
from .in_memory_reservation_repository import (
    InMemoryReservationRepository as InMemoryReservationRepository,
)
