"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache

from passguard.constants import MAX_REPEAT_RUN, MIN_PASSWORD_LENGTH, SPECIAL_CHARACTERS


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Password policy
    PASSWORD_MIN_LENGTH: int = MIN_PASSWORD_LENGTH
    PASSWORD_SPECIAL_CHARACTERS: str = SPECIAL_CHARACTERS
    PASSWORD_MAX_REPEAT_RUN: int = MAX_REPEAT_RUN
    PASSWORD_EXTRA_COMMON: str = ""  # Comma-separated additions to the denylist

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def extra_common_passwords(self) -> list[str]:
        return [p.strip() for p in self.PASSWORD_EXTRA_COMMON.split(",") if p.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
