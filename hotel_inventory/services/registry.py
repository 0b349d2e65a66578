"""In-memory hotel registry enforcing name and NIT uniqueness."""

import uuid
from typing import Optional

from structlog import get_logger

from hotel_inventory.config.settings import HotelRulesSettings, settings
from hotel_inventory.errors import (
    CapacityExceeded,
    DuplicateConfiguration,
    DuplicateName,
    DuplicateTaxId,
    HotelNotFound,
    InvalidField,
)
from hotel_inventory.models.hotel import Hotel, HotelFilter, HotelInput
from hotel_inventory.models.result import RegistryStats
from hotel_inventory.services.ledger import configured_total
from hotel_inventory.validators import (
    validate_hotel_input,
    validate_quantity,
    validate_room_combination,
)

logger = get_logger(__name__)

# Fields fixed at registration time
_REGISTRATION_FIELDS = ("name", "address", "city", "tax_id", "max_rooms")


class HotelRegistry:
    """Holds the registered hotels in insertion order.

    Each instance is an isolated store, created empty. Hotels are never
    deleted; ``replace`` stores the new value produced by a ledger update.
    """

    def __init__(self, rules: Optional[HotelRulesSettings] = None):
        """Initialize an empty registry.

        Args:
            rules: Business limits, defaults to the application settings
        """
        self.rules = rules or settings.rules
        self._hotels: dict[str, Hotel] = {}

    def __len__(self) -> int:
        return len(self._hotels)

    def __contains__(self, hotel_id: object) -> bool:
        return hotel_id in self._hotels

    def register(self, candidate: HotelInput) -> Hotel:
        """Validate and register a new hotel.

        Field rules are checked first (name, address, city, NIT, max rooms),
        then name uniqueness (case-insensitive) and NIT uniqueness.

        Args:
            candidate: Registration form data

        Returns:
            The stored Hotel with a fresh id and no room configurations

        Raises:
            InvalidField: If a field fails its format or range rule
            DuplicateName: If the name is already registered
            DuplicateTaxId: If the NIT is already registered
        """
        fields = validate_hotel_input(candidate, self.rules)

        name_key = fields["name"].casefold()
        if any(hotel.name.casefold() == name_key for hotel in self._hotels.values()):
            raise DuplicateName(fields["name"])

        if any(hotel.tax_id == fields["tax_id"] for hotel in self._hotels.values()):
            raise DuplicateTaxId(fields["tax_id"])

        hotel = Hotel(id=uuid.uuid4().hex, room_configurations=(), **fields)
        self._hotels[hotel.id] = hotel

        logger.info(
            "Registered hotel",
            hotel_id=hotel.id,
            hotel_name=hotel.name,
            city=hotel.city.value,
            tax_id=hotel.tax_id,
            max_rooms=hotel.max_rooms,
        )

        return hotel

    def get(self, hotel_id: str) -> Hotel:
        """Return the current value of a hotel.

        Raises:
            HotelNotFound: If no hotel has this id
        """
        try:
            return self._hotels[hotel_id]
        except KeyError:
            raise HotelNotFound(hotel_id) from None

    def replace(self, hotel: Hotel) -> Hotel:
        """Store an updated value for an already registered hotel.

        Only the room configuration list may differ from the stored value,
        and the new list must respect capacity, quantity, allow-list and
        combination uniqueness.

        Raises:
            HotelNotFound: If no hotel has this id
            InvalidField: If a registration field was changed or an entry is malformed
            InvalidOccupancyForType: If an entry's occupancy is not allowed for its type
            CapacityExceeded: If the configured total goes over max_rooms
            DuplicateConfiguration: If two entries share type and occupancy
        """
        stored = self.get(hotel.id)

        for field in _REGISTRATION_FIELDS:
            if getattr(hotel, field) != getattr(stored, field):
                raise InvalidField(
                    field, "No se puede modificar este campo de un hotel registrado"
                )

        seen = set()
        for config in hotel.room_configurations:
            validate_quantity(config.quantity, self.rules.quantity_min)
            validate_room_combination(config.room_type, config.occupancy)
            key = (config.room_type, config.occupancy)
            if key in seen:
                raise DuplicateConfiguration(config.room_type.value, config.occupancy.value)
            seen.add(key)

        total = configured_total(hotel)
        if total > hotel.max_rooms:
            stored_total = configured_total(stored)
            raise CapacityExceeded(
                requested=total - stored_total, remaining=stored.max_rooms - stored_total
            )

        self._hotels[hotel.id] = hotel
        return hotel

    def list_hotels(self, hotel_filter: Optional[HotelFilter] = None) -> list[Hotel]:
        """List hotels in registration order.

        The search term matches name, address or NIT as a case-insensitive
        substring; the city filter is an exact match.
        """
        hotels = list(self._hotels.values())
        if hotel_filter is None:
            return hotels

        if hotel_filter.search:
            term = hotel_filter.search.strip().casefold()
            hotels = [
                hotel
                for hotel in hotels
                if term in hotel.name.casefold()
                or term in hotel.address.casefold()
                or term in hotel.tax_id.casefold()
            ]

        if hotel_filter.city:
            hotels = [hotel for hotel in hotels if hotel.city.value == hotel_filter.city]

        logger.debug(
            "Listed hotels",
            search=hotel_filter.search,
            city=hotel_filter.city,
            count=len(hotels),
        )

        return hotels

    def stats(self) -> RegistryStats:
        """Hotel count, configured rooms and capacity across the registry."""
        return RegistryStats(
            hotel_count=len(self._hotels),
            configured_rooms=sum(configured_total(h) for h in self._hotels.values()),
            total_capacity=sum(h.max_rooms for h in self._hotels.values()),
        )
