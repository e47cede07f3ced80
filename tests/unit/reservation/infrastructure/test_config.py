import pytest
from pydantic import ValidationError

from hotel_reservation.reservation.infrastructure import ReservationSettings


class TestReservationSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("RESERVATION_HOTEL_NAME", raising=False)
        monkeypatch.delenv("RESERVATION_PRICE_PER_CLIENT", raising=False)
        settings = ReservationSettings()
        assert settings.hotel_name == "Hotel Luchadores"
        assert settings.price_per_client == 20.0

    def test_values_from_environment(self, monkeypatch):
        monkeypatch.setenv("RESERVATION_HOTEL_NAME", "Capsule Corp")
        monkeypatch.setenv("RESERVATION_PRICE_PER_CLIENT", "35.5")
        settings = ReservationSettings()
        assert settings.hotel_name == "Capsule Corp"
        assert settings.price_per_client == 35.5

    def test_negative_price_raises_error(self):
        with pytest.raises(ValidationError):
            ReservationSettings(price_per_client=-1)
