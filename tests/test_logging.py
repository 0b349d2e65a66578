"""Tests for logging and settings configuration."""

import io
import logging

import pytest

from hotel_inventory.config.logging import add_hotel_prefix, configure_logging, get_logger
from hotel_inventory.config.settings import HotelRulesSettings, LoggingSettings, Settings
from hotel_inventory.models import HotelInput
from hotel_inventory.services import HotelRegistry


class TestHotelPrefix:
    """Tests for the hotel log processor."""

    def test_name_and_id(self):
        event = add_hotel_prefix(
            None,
            "info",
            {"event": "Registered hotel", "hotel_name": "CARIBE", "hotel_id": "1a2b3c4d5e6f"},
        )
        assert event["event"] == "[CARIBE #1a2b3c4d] Registered hotel"

    def test_name_only(self):
        event = add_hotel_prefix(None, "info", {"event": "Registered hotel", "hotel_name": "CARIBE"})
        assert event["event"] == "[CARIBE] Registered hotel"

    def test_id_only(self):
        event = add_hotel_prefix(None, "warning", {"event": "Rejected", "hotel_id": "missing"})
        assert event["event"] == "[#missing] Rejected"

    def test_no_hotel_context(self):
        event = add_hotel_prefix(None, "info", {"event": "Listed hotels"})
        assert event["event"] == "Listed hotels"


class TestConfigureLogging:
    """Tests for configure_logging()."""

    @pytest.fixture(autouse=True)
    def restore_logging(self):
        yield
        configure_logging()

    def test_replaces_root_handlers(self):
        configure_logging()
        configure_logging()

        assert len(logging.getLogger().handlers) == 1

    def test_json_output_carries_hotel_prefix(self):
        stream = io.StringIO()
        configure_logging(LoggingSettings(level="INFO", format="json"), stream=stream)

        hotel = HotelRegistry().register(
            HotelInput(name="Hotel Caribe", address="Carrera 1 #2-87", city="CARTAGENA",
                       tax_id="80012345-6", max_rooms=30)
        )

        output = stream.getvalue()
        assert f"[HOTEL CARIBE #{hotel.id[:8]}] Registered hotel" in output

    def test_console_format_and_level(self):
        stream = io.StringIO()
        configure_logging(LoggingSettings(level="WARNING", format="console"), stream=stream)
        logger = get_logger("tests.logging")

        logger.info("Hidden event")
        logger.warning("Shown event", hotel_name="CARIBE")

        output = stream.getvalue()
        assert "Hidden event" not in output
        assert "[CARIBE] Shown event" in output
        assert " - WARNING - " in output


class TestSettings:
    """Tests for environment driven settings."""

    def test_rule_defaults(self):
        rules = HotelRulesSettings()
        assert (rules.name_min_length, rules.address_min_length) == (3, 5)
        assert (rules.max_rooms_min, rules.max_rooms_max) == (1, 1000)
        assert rules.quantity_min == 1

    def test_rules_from_environment(self, monkeypatch):
        monkeypatch.setenv("HOTEL_RULES_MAX_ROOMS_MAX", "200")
        assert HotelRulesSettings().max_rooms_max == 200

    def test_logging_from_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "console")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        settings = Settings()
        assert settings.logging.format == "console"
        assert settings.logging.level == "DEBUG"
