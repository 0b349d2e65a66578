"""Errors raised when hotel or room configuration input breaks a business rule."""

from typing import Optional


class HotelInventoryError(Exception):
    """Base exception for hotel inventory rule violations."""

    code = "HOTEL_INVENTORY_ERROR"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


class RegistrationError(HotelInventoryError):
    """Base exception for hotel registration failures."""

    pass


class ConfigurationError(HotelInventoryError):
    """Base exception for room configuration failures."""

    pass


class InvalidField(RegistrationError, ConfigurationError):
    """Raised when a single field fails its own format or range rule."""

    code = "INVALID_FIELD"

    def __init__(self, field: str, reason: str):
        super().__init__(reason, field=field)
        self.reason = reason


class DuplicateName(RegistrationError):
    """Raised when a hotel with the same name (any case) is already registered."""

    code = "DUPLICATE_NAME"

    def __init__(self, name: str):
        super().__init__("Ya existe un hotel registrado con este nombre", field="name")
        self.name = name


class DuplicateTaxId(RegistrationError):
    """Raised when a hotel with the same NIT is already registered."""

    code = "DUPLICATE_TAX_ID"

    def __init__(self, tax_id: str):
        super().__init__("Ya existe un hotel registrado con este NIT", field="tax_id")
        self.tax_id = tax_id


class InvalidOccupancyForType(ConfigurationError):
    """Raised when the occupancy is not allowed for the room type."""

    code = "INVALID_OCCUPANCY_FOR_TYPE"

    def __init__(self, room_type: str, occupancy: str):
        super().__init__(
            f"La acomodación {occupancy} no está permitida para el tipo {room_type}",
            field="occupancy",
        )
        self.room_type = room_type
        self.occupancy = occupancy


class CapacityExceeded(ConfigurationError):
    """Raised when adding rooms would go over the hotel's maximum room count."""

    code = "CAPACITY_EXCEEDED"

    def __init__(self, requested: int, remaining: int):
        super().__init__(
            f"La cantidad excede el límite del hotel. Disponibles: {remaining}",
            field="quantity",
        )
        self.requested = requested
        self.remaining = remaining


class DuplicateConfiguration(ConfigurationError):
    """Raised when the hotel already holds the same type and occupancy combination."""

    code = "DUPLICATE_CONFIGURATION"

    def __init__(self, room_type: str, occupancy: str):
        super().__init__(
            "Ya existe una configuración con este tipo de habitación y acomodación"
        )
        self.room_type = room_type
        self.occupancy = occupancy


class HotelNotFound(HotelInventoryError):
    """Raised when no hotel is registered under the given id."""

    code = "HOTEL_NOT_FOUND"

    def __init__(self, hotel_id: str):
        super().__init__(f"No existe un hotel con id {hotel_id}", field="hotel_id")
        self.hotel_id = hotel_id
