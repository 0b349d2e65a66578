"""Command-line entry point: load hotels from a JSON seed file and report."""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Optional

from hotel_inventory.config import configure_logging, get_logger, settings
from hotel_inventory.services import HotelInventoryService

logger = get_logger(__name__)


def load_seed(service: HotelInventoryService, seed: Any) -> dict[str, Any]:
    """Register each hotel in the seed and add its room configurations.

    Seed format::

        {"hotels": [{"name": ..., "address": ..., "city": ..., "taxId": ...,
                     "maxRooms": ..., "rooms": [{"quantity": ..., "roomType": ...,
                                                 "occupancy": ...}]}]}

    Args:
        service: Service receiving the operations
        seed: Parsed seed document; a wrong shape is reported in "errors"

    Returns:
        Dictionary with per-operation results and error/success counts
    """
    results: dict[str, Any] = {
        "success": True,
        "operations": [],
        "errors": [],
    }

    hotels = seed.get("hotels", []) if isinstance(seed, dict) else None
    if not isinstance(hotels, list):
        results["errors"].append(
            'El archivo debe ser un objeto con una lista "hotels"'
        )
        results["success"] = False
        return results

    for position, entry in enumerate(hotels):
        if not isinstance(entry, dict):
            results["errors"].append(f"hotels[{position}]: se esperaba un objeto")
            continue
        rooms = entry.get("rooms")
        if rooms is None:
            rooms = []
        if not isinstance(rooms, list):
            results["errors"].append(
                f'hotels[{position}]: "rooms" debe ser una lista'
            )
            continue

        hotel_data = {key: value for key, value in entry.items() if key != "rooms"}
        registration = service.register(hotel_data)
        results["operations"].append(
            {"operation": "register", "name": hotel_data.get("name"), **_outcome(registration)}
        )
        if not registration.success:
            results["errors"].append(
                f"{hotel_data.get('name')}: {registration.error.message}"
            )
            continue

        hotel_id = registration.hotel.id
        for room in rooms:
            outcome = service.add_configuration(hotel_id, room)
            results["operations"].append(
                {"operation": "add_configuration", "name": registration.hotel.name,
                 **_outcome(outcome)}
            )
            if not outcome.success:
                results["errors"].append(
                    f"{registration.hotel.name}: {outcome.error.message}"
                )

    results["success"] = not results["errors"]
    return results


def _outcome(result) -> dict[str, Any]:
    if result.success:
        return {"success": True}
    return {"success": False, "error": result.error.model_dump(exclude_none=True)}


def build_report(
    service: HotelInventoryService,
    search: Optional[str] = None,
    city: Optional[str] = None,
) -> dict[str, Any]:
    """Hotel listing with configuration summaries plus registry totals."""
    hotels = service.list_hotels(search=search, city=city)
    return {
        "hotels": [
            {
                **hotel.model_dump(mode="json", by_alias=True),
                "summary": service.summary(hotel.id).model_dump(mode="json"),
            }
            for hotel in hotels
        ],
        "stats": service.stats().model_dump(),
    }


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Register hotels and room configurations from a JSON seed file"
    )
    parser.add_argument("seed_file", type=Path, help="Path to the seed JSON file")
    parser.add_argument("--search", type=str, help="Filter by name, address or NIT")
    parser.add_argument("--city", type=str, help="Filter by exact city")
    args = parser.parse_args(argv)

    logger.info("Loading hotel seed", seed_file=str(args.seed_file), environment=settings.environment)

    try:
        with open(args.seed_file, encoding="utf-8") as f:
            seed = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error("Failed to read seed file", seed_file=str(args.seed_file), error=str(e))
        print(json.dumps({"success": False, "error": str(e)}))
        return 1

    service = HotelInventoryService()
    results = load_seed(service, seed)
    results["report"] = build_report(service, search=args.search, city=args.city)

    logger.info(
        "Seed loaded",
        hotel_count=results["report"]["stats"]["hotel_count"],
        error_count=len(results["errors"]),
    )

    print(json.dumps(results, indent=2, ensure_ascii=False, default=str))
    return 0 if results["success"] else 1


def run() -> int:
    """Console script entry point."""
    configure_logging()
    return main()


if __name__ == "__main__":
    sys.exit(run())
