"""
Application configuration using pydantic-settings.
All config is loaded from environment variables with sensible defaults.

The seat cycle timing is intentionally not configurable here: every instance
must derive the same open seat from the same timestamp.
"""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Ticketing Race Simulator"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # CORS (wide open for the simulation demo)
    CORS_ORIGINS: list[str] = ["*"]

    # Observability
    METRICS_ENABLED: bool = True

    model_config = {
        "env_file": ".env",
        "case_sensitive": True,
    }


@lru_cache()
def get_settings() -> Settings:
    return Settings()
