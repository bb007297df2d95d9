"""Application configuration powered by pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["critical", "error", "warning", "info", "debug", "trace"]


class Settings(BaseSettings):
    """Centralized strongly-typed configuration loaded from the environment and `.env`."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    PROJECT_NAME: str = "Greeting Service"
    PROJECT_VERSION: str = "1.0.0"

    # Environment form of the `service.message` property; unset means an empty greeting
    SERVICE_MESSAGE: str = Field("", description="Greeting returned verbatim by GET /")

    HOST: str = "0.0.0.0"
    PORT: int = Field(8000, description="TCP port the HTTP listener binds to")

    # Same names uvicorn accepts for --log-level
    LOG_LEVEL: LogLevel = "info"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _lowercase_log_level(cls, value):
        """Accept `DEBUG` as well as `debug`."""
        return value.lower() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    """Cache and return a singleton Settings instance to avoid re-parsing env."""
    return Settings()
