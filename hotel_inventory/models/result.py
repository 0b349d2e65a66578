"""Pydantic models returned across the in-process boundary."""

from typing import Optional

from pydantic import BaseModel, Field

from hotel_inventory.errors import CapacityExceeded, HotelInventoryError
from hotel_inventory.models.hotel import Hotel
from hotel_inventory.models.status import ConfigurationStatus


class ErrorDetail(BaseModel):
    """Typed description of a rejected operation."""

    code: str
    message: str
    field: Optional[str] = None
    remaining: Optional[int] = Field(
        default=None, description="Rooms still available, set for capacity errors"
    )

    @classmethod
    def from_exception(cls, error: HotelInventoryError) -> "ErrorDetail":
        return cls(
            code=error.code,
            message=error.message,
            field=error.field,
            remaining=error.remaining if isinstance(error, CapacityExceeded) else None,
        )


class OperationResult(BaseModel):
    """Outcome of a mutating operation: the resulting hotel or the error."""

    success: bool
    hotel: Optional[Hotel] = None
    error: Optional[ErrorDetail] = None

    @classmethod
    def ok(cls, hotel: Hotel) -> "OperationResult":
        return cls(success=True, hotel=hotel)

    @classmethod
    def failed(cls, error: HotelInventoryError) -> "OperationResult":
        return cls(success=False, error=ErrorDetail.from_exception(error))


class HotelSummary(BaseModel):
    """Per-hotel configuration progress as shown in the hotel listing."""

    hotel_id: str
    name: str
    city: str
    max_rooms: int
    configured: int
    remaining: int
    percentage: float
    status: ConfigurationStatus
    status_label: str


class RegistryStats(BaseModel):
    """Totals across every registered hotel."""

    hotel_count: int = 0
    configured_rooms: int = 0
    total_capacity: int = 0
