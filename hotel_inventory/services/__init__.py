"""Hotel registry, room configuration ledger and the boundary service."""

from hotel_inventory.services.inventory_service import HotelInventoryService
from hotel_inventory.services.registry import HotelRegistry

__all__ = ["HotelRegistry", "HotelInventoryService"]
