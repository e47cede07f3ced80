from .reservation_factory import BREAKFAST_COEFFICIENT as BREAKFAST_COEFFICIENT
from .reservation_factory import ReservationDetails as ReservationDetails
from .reservation_factory import ReservationFactory as ReservationFactory
from .reservation_id_counter import ReservationIdCounter as ReservationIdCounter
