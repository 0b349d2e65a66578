"""Hotel inventory data models."""

from hotel_inventory.models.catalog import (
    ALLOWED_OCCUPANCIES,
    TAX_ID_PATTERN,
    City,
    Occupancy,
    RoomType,
)
from hotel_inventory.models.hotel import (
    Hotel,
    HotelFilter,
    HotelInput,
    RoomConfig,
    RoomConfigInput,
)
from hotel_inventory.models.result import (
    ErrorDetail,
    HotelSummary,
    OperationResult,
    RegistryStats,
)
from hotel_inventory.models.status import (
    ConfigurationStatus,
    classify_configuration,
    configuration_percentage,
)

__all__ = [
    "ALLOWED_OCCUPANCIES",
    "TAX_ID_PATTERN",
    "City",
    "Occupancy",
    "RoomType",
    "Hotel",
    "HotelFilter",
    "HotelInput",
    "RoomConfig",
    "RoomConfigInput",
    "ErrorDetail",
    "HotelSummary",
    "OperationResult",
    "RegistryStats",
    "ConfigurationStatus",
    "classify_configuration",
    "configuration_percentage",
]
