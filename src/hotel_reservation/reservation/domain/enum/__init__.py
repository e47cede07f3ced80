from .reservation_error_kind import ReservationErrorKind as ReservationErrorKind
