"""Boundary service used by the presentation layer.

Wraps the registry and ledger, addresses hotels by id, tracks the selected
hotel and turns rule violations into OperationResult values.
"""

from typing import Any, Optional

from pydantic import ValidationError
from structlog import get_logger

from hotel_inventory.config.settings import HotelRulesSettings, settings
from hotel_inventory.errors import HotelInventoryError, InvalidField
from hotel_inventory.models.hotel import (
    Hotel,
    HotelFilter,
    HotelInput,
    RoomConfigInput,
)
from hotel_inventory.models.result import HotelSummary, OperationResult, RegistryStats
from hotel_inventory.services import ledger
from hotel_inventory.services.registry import HotelRegistry

logger = get_logger(__name__)

# Spanish reasons for pydantic error types seen when parsing form input
_PARSE_REASONS = {
    "missing": "Campo obligatorio",
    "model_type": "Se esperaba un objeto con los campos del formulario",
    "model_attributes_type": "Se esperaba un objeto con los campos del formulario",
}


def _parse(model: type, data: Any):
    """Build an input model from a dict, reporting the first bad field as InvalidField."""
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        aliases = {info.alias or name: name for name, info in model.model_fields.items()}
        loc = str(first["loc"][0]) if first.get("loc") else "input"
        reason = _PARSE_REASONS.get(first["type"], "Valor inválido")
        raise InvalidField(aliases.get(loc, loc), reason) from e


class HotelInventoryService:
    """Hotel registration and room configuration for a single session."""

    def __init__(
        self,
        registry: Optional[HotelRegistry] = None,
        rules: Optional[HotelRulesSettings] = None,
    ):
        """Initialize the service.

        Args:
            registry: Hotel store, a new empty registry when omitted
            rules: Business limits, defaults to the application settings
        """
        if registry is None:
            self.rules = rules or settings.rules
            self.registry = HotelRegistry(self.rules)
        else:
            self.rules = rules or registry.rules
            self.registry = registry
        self._selected_id: Optional[str] = None

    def register(self, data: HotelInput | dict[str, Any]) -> OperationResult:
        """Register a hotel and select it for configuration."""
        try:
            hotel = self.registry.register(_parse(HotelInput, data))
        except HotelInventoryError as e:
            logger.warning(
                "Hotel registration rejected",
                error_code=e.code,
                field=e.field,
                error=e.message,
            )
            return OperationResult.failed(e)

        self._selected_id = hotel.id
        return OperationResult.ok(hotel)

    def list_hotels(
        self,
        search: Optional[str] = None,
        city: Optional[str] = None,
    ) -> list[Hotel]:
        return self.registry.list_hotels(HotelFilter(search=search, city=city))

    def add_configuration(
        self, hotel_id: str, data: RoomConfigInput | dict[str, Any]
    ) -> OperationResult:
        """Add a room configuration to the hotel with the given id."""
        try:
            hotel = self.registry.get(hotel_id)
            room_input = _parse(RoomConfigInput, data)
            updated = ledger.add_configuration(
                hotel,
                room_input.quantity,
                room_input.room_type,
                room_input.occupancy,
                rules=self.rules,
            )
            self.registry.replace(updated)
        except HotelInventoryError as e:
            logger.warning(
                "Room configuration rejected",
                hotel_id=hotel_id,
                error_code=e.code,
                field=e.field,
                error=e.message,
            )
            return OperationResult.failed(e)

        return OperationResult.ok(updated)

    def remove_configuration(self, hotel_id: str, config_id: str) -> Hotel:
        """Remove a room configuration; unknown config ids are ignored.

        Raises:
            HotelNotFound: If no hotel has this id
        """
        hotel = self.registry.get(hotel_id)
        updated = ledger.remove_configuration(hotel, config_id)
        if updated is not hotel:
            self.registry.replace(updated)
        return updated

    def configured_total(self, hotel: Hotel) -> int:
        return ledger.configured_total(hotel)

    def summary(self, hotel_id: str) -> HotelSummary:
        return ledger.summarize(self.registry.get(hotel_id))

    def stats(self) -> RegistryStats:
        return self.registry.stats()

    def select_hotel(self, hotel_id: Optional[str]) -> Optional[Hotel]:
        """Select the hotel being configured, or clear the selection with None.

        Raises:
            HotelNotFound: If no hotel has this id
        """
        if hotel_id is None:
            self._selected_id = None
            return None
        hotel = self.registry.get(hotel_id)
        self._selected_id = hotel.id
        return hotel

    @property
    def selected_hotel(self) -> Optional[Hotel]:
        """Latest value of the selected hotel."""
        if self._selected_id is None:
            return None
        return self.registry.get(self._selected_id)
