from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict

from order_core.settings.base import OrderCoreBaseSettings


class ApplicationSettings(OrderCoreBaseSettings):
    """
    General application settings.
    Loaded from .env with exact variable name matching.
    """

    app_name: str = Field("delivery-order-core", alias="APP_NAME")
    environment: Literal["development", "test", "production"] = Field(
        "development", alias="ENVIRONMENT"
    )
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    @field_validator("log_level")
    @classmethod
    def normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level


class DatabaseSettings(OrderCoreBaseSettings):
    """
    Database configuration settings.

    Loaded from environment variables (prefix ``DB_``) or .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DB_",
        extra="ignore",
    )

    database_url: str = "sqlite+aiosqlite:///./orders.db"
    echo_sql: bool = False
