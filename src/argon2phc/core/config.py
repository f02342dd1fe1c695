"""Centralized settings using pydantic-settings.

All environment variable reads are consolidated here. Import
`get_settings` from this module rather than reading os.environ directly.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables.

    All env vars are prefixed with ARGON2PHC_ (case-insensitive).
    """

    model_config = SettingsConfigDict(
        env_prefix="ARGON2PHC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Default hashing parameters
    hash_length: int = Field(default=32, ge=0)
    time_cost: int = Field(default=3, ge=0)
    memory_cost: int = Field(default=1 << 16, ge=0)
    parallelism: int = Field(default=4, ge=0)
    algorithm: Literal["argon2i", "argon2d", "argon2id"] = "argon2id"

    # Worker pool (None lets ThreadPoolExecutor pick its own size)
    max_workers: int | None = Field(default=None, gt=0)

    # Logging
    log_format: Literal["console", "json"] = "console"
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings singleton."""
    return Settings()
