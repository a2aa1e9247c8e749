"""Service configuration using Pydantic Settings.

Covers how the service runs (server, CORS, logging, metrics). The decision
rules themselves are configured by EngineSettings with the ENGINE_ prefix.
"""

from functools import lru_cache
from typing import List, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from loan_decision import __version__

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Service settings read from environment variables or a .env file.

    Example:
        LOG_LEVEL=debug LOG_FORMAT=console PORT=9000 loan-decision-gateway
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "loan-decision-gateway"
    app_version: str = __version__
    debug: bool = Field(default=False, description="Enables uvicorn auto-reload")

    host: str = "0.0.0.0"
    port: int = Field(default=8080, gt=0, lt=65536)

    cors_allow_origins: List[str] = Field(
        default=["*"],
        description="Origins allowed to call the API from a browser",
    )

    metrics_enabled: bool = Field(
        default=True,
        description="Expose /metrics and record HTTP request metrics",
    )

    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
