"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ``SRTKIT_``-prefixed environment variables.

    Attributes:
        encoding: Codec used to decode subtitle files ("utf-8-sig" drops a BOM)
        output_encoding: Codec used to encode saved subtitle files
        log_level: Minimum level emitted by structlog
        log_json: Render log events as JSON instead of console lines
    """

    encoding: str = "utf-8-sig"
    output_encoding: str = "utf-8"

    log_level: str = "INFO"
    log_json: bool = False

    model_config = SettingsConfigDict(
        env_prefix="SRTKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings.

    Returns:
        Settings instance loaded from environment

    Note:
        Settings are cached. Use get_settings.cache_clear() to reload
        settings in tests.
    """
    return Settings()
