from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_HOTEL_NAME = "Hotel Luchadores"
DEFAULT_PRICE_PER_CLIENT = 20.0


class ReservationSettings(BaseSettings):
    """予約マネージャの設定（環境変数 RESERVATION_* で上書き可能）"""

    model_config = SettingsConfigDict(env_prefix="RESERVATION_")

    hotel_name: str = DEFAULT_HOTEL_NAME
    price_per_client: float = Field(
        default=DEFAULT_PRICE_PER_CLIENT,
        ge=0,
        description="1人1泊あたりの料金",
    )


settings = ReservationSettings()
