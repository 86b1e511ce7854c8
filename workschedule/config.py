from __future__ import annotations

from datetime import date

from pydantic_settings import BaseSettings, SettingsConfigDict

from workschedule.models.enums import Granularity


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_ignore_empty=True, extra="ignore")

    APP_NAME: str = "Work Schedule"
    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: str = "http://localhost:3000"

    # Calendar dates are taken in this zone when a source timestamp carries an offset.
    TIMEZONE: str = "UTC"

    # Pins "today" for demos against the mock data set (e.g. 2025-01-21).
    SCHEDULE_TODAY: date | None = None
    DEFAULT_GRANULARITY: Granularity = Granularity.WEEK

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


settings = Settings()
