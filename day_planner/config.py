from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database (single user, single device)
    DATABASE_URL: str = "sqlite+aiosqlite:///./day_planner.db"

    # App
    APP_DEBUG: bool = False

    # Points ledger: how many entries the recent-history query returns
    POINTS_LOG_LIMIT: int = 200

    # Seed sample tasks and rewards into an empty database on bootstrap
    SEED_SAMPLE_DATA: bool = True

    @field_validator("POINTS_LOG_LIMIT", mode="before")
    @classmethod
    def parse_points_log_limit(cls, v) -> int:
        if v in (None, ""):
            return 200
        return max(1, int(v))


@lru_cache
def get_settings() -> Settings:
    return Settings()
