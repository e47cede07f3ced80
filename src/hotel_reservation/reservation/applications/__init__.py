from .reservation_manager import ReservationManager as ReservationManager
