"""Application configuration for the token service."""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration.

    Values come from the process environment first, then a local ``.env`` file,
    then the defaults below. Empty variables count as unset.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        env_ignore_empty=True,
        frozen=True,
    )

    livekit_url: str = Field(default="ws://localhost:7880")
    livekit_api_key: str = Field(default="devkey")
    livekit_api_secret: str = Field(default="APIsecretkey123", repr=False)

    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=3000)
    static_dir: str = Field(default="./static")
    log_level: str = Field(default="INFO")


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()
