import json
import logging
from pathlib import Path

from pydantic import TypeAdapter

from fleet.models.vehicle import Vehicle
from fleet.schemas.vehicle import VehicleRecord
from fleet.services.vehicle_service import validate_vehicle
from fleet.services.vehicle_store import VehicleStore
from fleet.utils.exceptions import FieldRequiredError

logger = logging.getLogger(__name__)

_records = TypeAdapter(list[VehicleRecord])


def load_vehicles(path: str | Path) -> dict[int, Vehicle]:
    """Read a JSON array of vehicles, keyed by their ``id``."""
    with open(path, encoding="utf-8") as f:
        records = _records.validate_python(json.load(f))

    vehicles: dict[int, Vehicle] = {}
    keys: dict[tuple[str, str, int], int] = {}
    for record in records:
        if record.id in vehicles:
            raise ValueError(f"duplicate vehicle id {record.id} in {path}")
        vehicle = record.to_vehicle()
        try:
            validate_vehicle(vehicle)
        except FieldRequiredError as exc:
            raise ValueError(f"vehicle {record.id} in {path}: {exc}") from exc
        if vehicle.key in keys:
            raise ValueError(
                f"vehicle {record.id} in {path} repeats brand, model and year of vehicle {keys[vehicle.key]}"
            )
        keys[vehicle.key] = record.id
        vehicles[record.id] = vehicle
    return vehicles


def seed_store(store: VehicleStore, path: str | Path) -> int:
    """Fill an empty store from ``path``. Returns the number of vehicles loaded."""
    if len(store) > 0:
        logger.info("Store already populated, skipping seed from %s", path)
        return 0

    vehicles = load_vehicles(path)
    store.load(vehicles)
    logger.info("Seeded %d vehicles from %s (last id %d)", len(vehicles), path, store.last_id)
    return len(vehicles)
