"""Configuration package."""

from hotel_inventory.config.logging import configure_logging, get_logger
from hotel_inventory.config.settings import (
    HotelRulesSettings,
    LoggingSettings,
    Settings,
    settings,
)

__all__ = [
    "settings",
    "Settings",
    "HotelRulesSettings",
    "LoggingSettings",
    "configure_logging",
    "get_logger",
]
