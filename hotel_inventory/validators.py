"""Field validation for hotel registration and room configuration input.

The ``is_*`` helpers are plain predicates. The ``validate_*`` functions
return the normalized value or raise InvalidField naming the field.
"""

import re
from typing import Any

from hotel_inventory.config.settings import HotelRulesSettings
from hotel_inventory.errors import InvalidField, InvalidOccupancyForType
from hotel_inventory.models.catalog import (
    ALLOWED_OCCUPANCIES,
    TAX_ID_PATTERN,
    City,
    Occupancy,
    RoomType,
)
from hotel_inventory.models.hotel import HotelInput

_TAX_ID_RE = re.compile(TAX_ID_PATTERN, re.ASCII)


def is_valid_tax_id(tax_id: str) -> bool:
    """Check a NIT against the 12345678-9 format (8 to 10 digits, one check digit)."""
    return isinstance(tax_id, str) and _TAX_ID_RE.fullmatch(tax_id) is not None


def is_valid_city(city: Any) -> bool:
    try:
        City(city)
    except ValueError:
        return False
    return True


def allowed_occupancies(room_type: RoomType | str) -> tuple[Occupancy, ...]:
    """Occupancies a room type may be configured with.

    Raises:
        ValueError: If room_type is not a known room type
    """
    return ALLOWED_OCCUPANCIES[RoomType(room_type)]


def is_occupancy_allowed(room_type: RoomType | str, occupancy: Occupancy | str) -> bool:
    try:
        return Occupancy(occupancy) in allowed_occupancies(room_type)
    except ValueError:
        return False


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_name(name: Any, min_length: int = 3) -> str:
    if not isinstance(name, str) or not name.strip():
        raise InvalidField("name", "El nombre del hotel es obligatorio")
    name = name.strip()
    if len(name) < min_length:
        raise InvalidField("name", f"El nombre debe tener al menos {min_length} caracteres")
    return name.upper()


def validate_address(address: Any, min_length: int = 5) -> str:
    if not isinstance(address, str) or not address.strip():
        raise InvalidField("address", "La dirección es obligatoria")
    address = address.strip()
    if len(address) < min_length:
        raise InvalidField(
            "address", f"La dirección debe tener al menos {min_length} caracteres"
        )
    return address.upper()


def validate_city(city: Any) -> City:
    if not city:
        raise InvalidField("city", "La ciudad es obligatoria")
    try:
        return City(city)
    except ValueError:
        raise InvalidField("city", f"Ciudad no válida: {city}") from None


def validate_tax_id(tax_id: Any) -> str:
    if not isinstance(tax_id, str) or not tax_id.strip():
        raise InvalidField("tax_id", "El NIT es obligatorio")
    tax_id = tax_id.strip()
    if not is_valid_tax_id(tax_id):
        raise InvalidField("tax_id", "Formato de NIT inválido (ej: 12345678-9)")
    return tax_id


def validate_max_rooms(value: Any, minimum: int = 1, maximum: int = 1000) -> int:
    if value is None:
        raise InvalidField("max_rooms", "El número de habitaciones es obligatorio")
    if not _is_int(value):
        raise InvalidField("max_rooms", "El número de habitaciones debe ser un entero")
    if value < minimum:
        raise InvalidField("max_rooms", f"Debe tener al menos {minimum} habitación")
    if value > maximum:
        raise InvalidField("max_rooms", f"No puede exceder {maximum} habitaciones")
    return value


def validate_quantity(value: Any, minimum: int = 1) -> int:
    if value is None:
        raise InvalidField("quantity", "La cantidad es obligatoria")
    if not _is_int(value):
        raise InvalidField("quantity", "La cantidad debe ser un entero")
    if value < minimum:
        raise InvalidField("quantity", f"Debe ser al menos {minimum}")
    return value


def validate_room_type(value: Any) -> RoomType:
    if not value:
        raise InvalidField("room_type", "El tipo de habitación es obligatorio")
    try:
        return RoomType(value)
    except ValueError:
        raise InvalidField("room_type", f"Tipo de habitación no válido: {value}") from None


def validate_occupancy(value: Any) -> Occupancy:
    if not value:
        raise InvalidField("occupancy", "La acomodación es obligatoria")
    try:
        return Occupancy(value)
    except ValueError:
        raise InvalidField("occupancy", f"Acomodación no válida: {value}") from None


def validate_room_combination(room_type: RoomType, occupancy: Occupancy) -> None:
    """Raise InvalidOccupancyForType unless the occupancy is allowed for the type."""
    if occupancy not in ALLOWED_OCCUPANCIES[room_type]:
        raise InvalidOccupancyForType(room_type.value, occupancy.value)


def validate_hotel_input(data: HotelInput, rules: HotelRulesSettings) -> dict[str, Any]:
    """Validate registration fields in form order; the first failure is raised.

    Returns:
        Normalized field values: name and address upper-cased, city as City
    """
    return {
        "name": validate_name(data.name, rules.name_min_length),
        "address": validate_address(data.address, rules.address_min_length),
        "city": validate_city(data.city),
        "tax_id": validate_tax_id(data.tax_id),
        "max_rooms": validate_max_rooms(
            data.max_rooms, rules.max_rooms_min, rules.max_rooms_max
        ),
    }
