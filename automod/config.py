"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has a working default: the library runs with no environment at all
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - AUTOMOD_ prefix: the embedding application owns the unprefixed namespace
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Legalizer settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="AUTOMOD_", case_sensitive=False,
        extra="ignore",
    )

    # Strategy gate seed values
    allow_api: bool = True
    allow_brute_force: bool = True

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
