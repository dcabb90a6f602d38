# scheduler/config.py

from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    timezone: str = "Europe/Amsterdam"
    work_start_hour: int = 8
    work_end_hour: int = 17

    city_multiplier: float = 1.35
    base_speed_kmh: float = 28.0
    max_buffer_minutes: int = 45

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="SCHEDULER_",
        env_file=BASE_DIR / ".env",
        extra="ignore",
    )

    @property
    def resolved_log_level(self) -> str:
        level = self.log_level.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            return "INFO"
        return level


def get_settings() -> Settings:
    return Settings()
