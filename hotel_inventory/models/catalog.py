"""Fixed catalogs: cities, room types, occupancies and the allowed combinations."""

from enum import Enum
from typing import Optional


class City(str, Enum):
    """Cities where a hotel can be registered."""

    CARTAGENA = "CARTAGENA"
    BOGOTA = "BOGOTÁ"
    MEDELLIN = "MEDELLÍN"
    CALI = "CALI"
    BARRANQUILLA = "BARRANQUILLA"
    BUCARAMANGA = "BUCARAMANGA"
    PEREIRA = "PEREIRA"
    SANTA_MARTA = "SANTA MARTA"
    MANIZALES = "MANIZALES"
    PASTO = "PASTO"
    IBAGUE = "IBAGUÉ"
    CUCUTA = "CUCUTA"
    VILLAVICENCIO = "VILLAVICENCIO"
    MONTERIA = "MONTERÍA"
    VALLEDUPAR = "VALLEDUPAR"

    @classmethod
    def _missing_(cls, value: object) -> Optional["City"]:
        if isinstance(value, str):
            normalized = value.strip().upper()
            for city in cls:
                if city.value == normalized:
                    return city
        return None


class RoomType(str, Enum):
    """Room tier.

    The Spanish codes used by the registration forms ("ESTANDAR") are
    accepted as aliases when parsing.
    """

    STANDARD = "STANDARD"
    JUNIOR = "JUNIOR"
    SUITE = "SUITE"

    @classmethod
    def _missing_(cls, value: object) -> Optional["RoomType"]:
        if isinstance(value, str):
            return _ROOM_TYPE_ALIASES.get(value.strip().upper())
        return None

    @property
    def label(self) -> str:
        return _ROOM_TYPE_LABELS[self]


class Occupancy(str, Enum):
    """Bed arrangement of a room.

    Accepts the Spanish codes SENCILLA, DOBLE, TRIPLE and CUADRUPLE as aliases.
    """

    SINGLE = "SINGLE"
    DOUBLE = "DOUBLE"
    TRIPLE = "TRIPLE"
    QUADRUPLE = "QUADRUPLE"

    @classmethod
    def _missing_(cls, value: object) -> Optional["Occupancy"]:
        if isinstance(value, str):
            return _OCCUPANCY_ALIASES.get(value.strip().upper())
        return None

    @property
    def label(self) -> str:
        return _OCCUPANCY_LABELS[self]


_ROOM_TYPE_ALIASES = {
    "STANDARD": RoomType.STANDARD,
    "ESTANDAR": RoomType.STANDARD,
    "ESTÁNDAR": RoomType.STANDARD,
    "JUNIOR": RoomType.JUNIOR,
    "SUITE": RoomType.SUITE,
}

_OCCUPANCY_ALIASES = {
    "SINGLE": Occupancy.SINGLE,
    "SENCILLA": Occupancy.SINGLE,
    "DOUBLE": Occupancy.DOUBLE,
    "DOBLE": Occupancy.DOUBLE,
    "TRIPLE": Occupancy.TRIPLE,
    "QUADRUPLE": Occupancy.QUADRUPLE,
    "CUADRUPLE": Occupancy.QUADRUPLE,
    "CUÁDRUPLE": Occupancy.QUADRUPLE,
}

_ROOM_TYPE_LABELS = {
    RoomType.STANDARD: "Estándar",
    RoomType.JUNIOR: "Junior",
    RoomType.SUITE: "Suite",
}

_OCCUPANCY_LABELS = {
    Occupancy.SINGLE: "Sencilla",
    Occupancy.DOUBLE: "Doble",
    Occupancy.TRIPLE: "Triple",
    Occupancy.QUADRUPLE: "Cuádruple",
}

# Occupancies each room type may be configured with
ALLOWED_OCCUPANCIES: dict[RoomType, tuple[Occupancy, ...]] = {
    RoomType.STANDARD: (Occupancy.SINGLE, Occupancy.DOUBLE),
    RoomType.JUNIOR: (Occupancy.TRIPLE, Occupancy.QUADRUPLE),
    RoomType.SUITE: (Occupancy.SINGLE, Occupancy.DOUBLE, Occupancy.TRIPLE),
}

TAX_ID_PATTERN = r"^\d{8,10}-\d{1}$"
