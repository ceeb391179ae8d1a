"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has a default: the service runs with no environment at all
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - COINS_ prefix keeps generic names (PORT, HOST) from colliding with the platform
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Names both logging and uvicorn accept; stdlib aliases folded in
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="COINS_", env_file=".env", case_sensitive=False,
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # API
    cors_origins: list[str] = ["*"]

    # Randomness: None uses the process-wide source
    random_seed: int | None = None

    # Observability
    log_level: str = "INFO"
    log_format: str = "text"

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        level = v.upper()
        level = _LEVEL_ALIASES.get(level, level)
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level: {v}")
        return level

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        fmt = v.lower()
        if fmt not in ("text", "json"):
            raise ValueError("log_format must be 'text' or 'json'")
        return fmt


@lru_cache
def get_settings() -> Settings:
    return Settings()
