from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    USER_SERVICE_URL: str | None = None
    SALON_SERVICE_URL: str | None = None
    SERVICE_OFFERING_URL: str | None = None
    BOOKING_SERVICE_URL: str = "http://localhost:8000"
    HTTP_TIMEOUT_SECONDS: float = 10.0

    STORE_PROVIDER: str = "memory"
    BOOKING_DATA_DIR: str = "./data/bookings"
    DIRECTORY_SEED_FILE: str | None = None

    REDIS_URL: str | None = None
    BOOKING_QUEUE: str = "booking-notifications"
    PAYMENT_QUEUE: str = "payment-notifications"
    QUEUE_POLL_SECONDS: int = 1

    SMTP_HOST: str | None = None
    SMTP_PORT: int = 587
    SMTP_USERNAME: str | None = None
    SMTP_PASSWORD: str | None = None
    SMTP_USE_TLS: bool = True
    MAIL_FROM: str = "Salon Booking <no-reply@salonbooking.local>"
    CURRENCY_SYMBOL: str = "₹"

    @property
    def is_local(self) -> bool:
        return self.ENV.lower() in {"dev", "local"}


settings = Settings()
