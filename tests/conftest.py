import json
from pathlib import Path

import pytest

from hotel_inventory.config import configure_logging
from hotel_inventory.config.settings import HotelRulesSettings
from hotel_inventory.models import HotelInput
from hotel_inventory.services import HotelInventoryService, HotelRegistry


FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def rules():
    """Default business limits."""
    return HotelRulesSettings()


@pytest.fixture
def registry(rules):
    """Empty, isolated hotel registry."""
    return HotelRegistry(rules)


@pytest.fixture
def service(registry):
    """Boundary service over an empty registry."""
    return HotelInventoryService(registry=registry)


@pytest.fixture
def hotel_input():
    """Valid registration form data."""
    return HotelInput(
        name="Decameron Test",
        address="Calle 1 #2-3",
        city="CARTAGENA",
        tax_id="12345678-9",
        max_rooms=10,
    )


@pytest.fixture
def hotel(registry, hotel_input):
    """Registered hotel with ten rooms of capacity and no configurations."""
    return registry.register(hotel_input)


@pytest.fixture
def seed_path():
    """Path to a seed file where every operation succeeds."""
    return FIXTURES_DIR / "hotels_seed.json"


@pytest.fixture
def invalid_seed_path():
    """Path to a seed file with rejected operations."""
    return FIXTURES_DIR / "hotels_seed_invalid.json"


@pytest.fixture
def seed(seed_path):
    """Load the valid seed document."""
    with open(seed_path, encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture(scope="session", autouse=True)
def logging_configured():
    """Route structlog through stdlib logging so test stdout stays clean."""
    configure_logging()
