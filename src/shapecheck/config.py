"""shapecheck configuration management."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment (``SHAPECHECK_*``)."""

    model_config = SettingsConfigDict(
        env_prefix="SHAPECHECK_",
        extra="ignore",
    )

    # Level applied by configure_logging()
    log_level: str = "WARNING"

    # Log every field failure at DEBUG
    log_failures: bool = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
