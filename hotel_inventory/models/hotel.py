"""Pydantic models for hotels, room configurations and their form inputs."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from hotel_inventory.models.catalog import City, Occupancy, RoomType


class RoomConfig(BaseModel):
    """A (room type, occupancy) line of a hotel's inventory with its quantity."""

    id: str
    quantity: int = Field(description="Number of rooms with this combination")
    room_type: RoomType = Field(alias="roomType")
    occupancy: Occupancy

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Hotel(BaseModel):
    """A registered hotel.

    Instances are immutable; ledger operations return a new value with the
    updated configuration list.
    """

    id: str
    name: str
    address: str
    city: City
    tax_id: str = Field(alias="taxId")
    max_rooms: int = Field(alias="maxRooms", description="Hard ceiling for configured rooms")
    room_configurations: tuple[RoomConfig, ...] = Field(
        default_factory=tuple, alias="roomConfigurations"
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def find_configuration(
        self, room_type: RoomType, occupancy: Occupancy
    ) -> Optional[RoomConfig]:
        """Return the entry holding the given combination, if any."""
        for config in self.room_configurations:
            if config.room_type == room_type and config.occupancy == occupancy:
                return config
        return None


class HotelInput(BaseModel):
    """Raw registration form data.

    Values are kept as given; the registry validates them in form order.
    """

    name: Any = ""
    address: Any = ""
    city: Any = ""
    tax_id: Any = Field(default="", alias="taxId")
    max_rooms: Any = Field(default=None, alias="maxRooms")

    model_config = ConfigDict(populate_by_name=True)


class RoomConfigInput(BaseModel):
    """Raw room configuration form data, validated by the ledger."""

    quantity: Any = None
    room_type: Any = Field(default=None, alias="roomType")
    occupancy: Any = None

    model_config = ConfigDict(populate_by_name=True)


class HotelFilter(BaseModel):
    """Listing filter: free-text search plus an exact city match."""

    search: Optional[str] = None
    city: Optional[str] = None
