"""Application settings and configuration management."""
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class HotelRulesSettings(BaseSettings):
    """Business limits applied when registering hotels and configuring rooms."""

    name_min_length: int = 3
    address_min_length: int = 5
    max_rooms_min: int = 1
    max_rooms_max: int = 1000
    quantity_min: int = 1

    model_config = SettingsConfigDict(env_prefix="HOTEL_RULES_")


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["json", "console"] = "json"

    model_config = SettingsConfigDict(env_prefix="LOG_")


class Settings(BaseSettings):
    """Main application settings."""

    environment: Literal["dev", "staging", "prod"] = "dev"
    debug: bool = False

    # Sub-settings
    rules: HotelRulesSettings = Field(default_factory=HotelRulesSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = Settings()
