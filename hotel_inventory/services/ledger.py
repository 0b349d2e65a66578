"""Room configuration ledger: capacity and combination rules per hotel."""

import uuid
from typing import Any, Optional

from structlog import get_logger

from hotel_inventory.config.settings import HotelRulesSettings, settings
from hotel_inventory.errors import CapacityExceeded, DuplicateConfiguration
from hotel_inventory.models.hotel import Hotel, RoomConfig
from hotel_inventory.models.result import HotelSummary
from hotel_inventory.models.status import classify_configuration, configuration_percentage
from hotel_inventory.validators import (
    validate_occupancy,
    validate_quantity,
    validate_room_combination,
    validate_room_type,
)

logger = get_logger(__name__)


def configured_total(hotel: Hotel) -> int:
    """Sum of configured room quantities, always derived from the current list."""
    return sum(config.quantity for config in hotel.room_configurations)


def remaining_capacity(hotel: Hotel) -> int:
    """Rooms that can still be configured before reaching max_rooms."""
    return hotel.max_rooms - configured_total(hotel)


def add_configuration(
    hotel: Hotel,
    quantity: Any,
    room_type: Any,
    occupancy: Any,
    rules: Optional[HotelRulesSettings] = None,
) -> Hotel:
    """Append a room configuration to a hotel.

    Checks run in order: quantity, room type, occupancy, type/occupancy
    allow-list, capacity, duplicate combination.

    Args:
        hotel: Hotel to configure
        quantity: Number of rooms (integer >= 1)
        room_type: RoomType or its code (English or Spanish)
        occupancy: Occupancy or its code (English or Spanish)
        rules: Business limits, defaults to the application settings

    Returns:
        New Hotel value with the entry appended; the given hotel is untouched

    Raises:
        InvalidField: If quantity, room type or occupancy is malformed
        InvalidOccupancyForType: If the occupancy is not allowed for the type
        CapacityExceeded: If the quantity does not fit in the remaining capacity
        DuplicateConfiguration: If the combination is already configured
    """
    rules = rules or settings.rules

    quantity = validate_quantity(quantity, rules.quantity_min)
    room_type = validate_room_type(room_type)
    occupancy = validate_occupancy(occupancy)
    validate_room_combination(room_type, occupancy)

    current_total = configured_total(hotel)
    if current_total + quantity > hotel.max_rooms:
        raise CapacityExceeded(
            requested=quantity, remaining=hotel.max_rooms - current_total
        )

    if hotel.find_configuration(room_type, occupancy) is not None:
        raise DuplicateConfiguration(room_type.value, occupancy.value)

    config = RoomConfig(
        id=uuid.uuid4().hex,
        quantity=quantity,
        room_type=room_type,
        occupancy=occupancy,
    )
    updated = hotel.model_copy(
        update={"room_configurations": hotel.room_configurations + (config,)}
    )

    logger.info(
        "Added room configuration",
        hotel_id=hotel.id,
        hotel_name=hotel.name,
        config_id=config.id,
        quantity=quantity,
        room_type=room_type.value,
        occupancy=occupancy.value,
        configured_total=current_total + quantity,
        max_rooms=hotel.max_rooms,
    )

    return updated


def remove_configuration(hotel: Hotel, config_id: str) -> Hotel:
    """Remove the entry with the given id; an unknown id leaves the hotel unchanged."""
    remaining = tuple(
        config for config in hotel.room_configurations if config.id != config_id
    )
    if len(remaining) == len(hotel.room_configurations):
        logger.debug(
            "Room configuration not found, nothing removed",
            hotel_id=hotel.id,
            hotel_name=hotel.name,
            config_id=config_id,
        )
        return hotel

    logger.info(
        "Removed room configuration",
        hotel_id=hotel.id,
        hotel_name=hotel.name,
        config_id=config_id,
    )
    return hotel.model_copy(update={"room_configurations": remaining})


def summarize(hotel: Hotel) -> HotelSummary:
    """Build the listing summary: configured, remaining, percentage and status."""
    total = configured_total(hotel)
    status = classify_configuration(total, hotel.max_rooms)
    return HotelSummary(
        hotel_id=hotel.id,
        name=hotel.name,
        city=hotel.city.value,
        max_rooms=hotel.max_rooms,
        configured=total,
        remaining=hotel.max_rooms - total,
        percentage=round(configuration_percentage(total, hotel.max_rooms), 2),
        status=status,
        status_label=status.label,
    )
