"""
Environment-based configuration using pydantic-settings.
Every option has a default, so the shuffler runs with no environment at all.
"""
import logging
from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ── Core ────────────────────────────────────────────────────────────────
    ENV: str = "development"

    # ── Logging ─────────────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"
    NO_COLOR: bool = False

    # ── Song data ───────────────────────────────────────────────────────────
    CSV_ENCODING: str = "utf-8"

    # ── Shuffle ─────────────────────────────────────────────────────────────
    SHUFFLE_SEED: Optional[int] = None    # fixed seed → reproducible order

    @field_validator("LOG_LEVEL")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{v}'")
        return level

    @property
    def is_production(self) -> bool:
        return self.ENV == "production"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
