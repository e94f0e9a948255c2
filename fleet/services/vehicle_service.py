import logging
from collections.abc import Sequence
from dataclasses import fields, replace

from fleet.models.vehicle import Vehicle
from fleet.schemas.criteria import DimensionQuery, WeightQuery
from fleet.services.vehicle_store import VehicleStore
from fleet.utils.exceptions import (
    AlreadyExistsError,
    FieldRequiredError,
    InvalidQueryError,
    NotFoundError,
    VehicleAlreadyExistsError,
    VehicleNotFoundError,
)

logger = logging.getLogger(__name__)

# Checked in this order; the first empty one is reported.
REQUIRED_FIELDS: list[tuple[str, str]] = [
    ("brand", "Brand"),
    ("model", "Model"),
    ("color", "Color"),
    ("fabrication_year", "Year"),
    ("capacity", "Passengers"),
    ("transmission", "Transmission"),
    ("max_speed", "Max Speed"),
]

_UPDATABLE_FIELDS = {f.name for f in fields(Vehicle)} - {"id"}


def validate_vehicle(vehicle: Vehicle) -> None:
    """Raise FieldRequiredError for the first required attribute left empty or zero."""
    for attribute, label in REQUIRED_FIELDS:
        if not getattr(vehicle, attribute):
            raise FieldRequiredError(label)


class VehicleService:
    """Business rules on top of a VehicleStore.

    Store errors are re-raised as service errors: missing records and
    invalid queries both become NotFoundError, uniqueness conflicts become
    AlreadyExistsError.
    """

    def __init__(self, store: VehicleStore):
        self.store = store

    def find_all(self) -> dict[int, Vehicle]:
        return self.store.find_all()

    def get_by_id(self, vehicle_id: int) -> Vehicle:
        try:
            return self.store.get_by_id(vehicle_id)
        except VehicleNotFoundError as exc:
            raise NotFoundError(f"vehicle {vehicle_id} not found: {exc}") from exc

    def save(self, vehicle: Vehicle) -> Vehicle:
        validate_vehicle(vehicle)
        try:
            self.store.save(vehicle)
        except VehicleAlreadyExistsError as exc:
            raise AlreadyExistsError(f"vehicle already exists: {exc}") from exc
        logger.info("Created vehicle %d", vehicle.id)
        return vehicle

    def save_many(self, vehicles: Sequence[Vehicle]) -> list[Vehicle]:
        """Validate every vehicle, then save them in order.

        A validation failure saves nothing. A conflict stops the batch but
        keeps the vehicles saved before it.
        """
        for vehicle in vehicles:
            validate_vehicle(vehicle)
        try:
            self.store.save_many(vehicles)
        except VehicleAlreadyExistsError as exc:
            raise AlreadyExistsError(f"vehicle already exists: {exc}") from exc
        logger.info("Created %d vehicles", len(vehicles))
        return list(vehicles)

    def update_vehicle(self, vehicle: Vehicle) -> Vehicle:
        validate_vehicle(vehicle)
        try:
            self.store.update_vehicle(vehicle)
        except VehicleNotFoundError as exc:
            raise NotFoundError(f"vehicle {vehicle.id} not found: {exc}") from exc
        return vehicle

    def update_fields(self, vehicle_id: int, **changes) -> Vehicle:
        """Overlay ``changes`` on the stored vehicle and save it as a full replace."""
        unknown = set(changes) - _UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"cannot update fields: {', '.join(sorted(unknown))}")
        current = self.get_by_id(vehicle_id)
        return self.update_vehicle(replace(current, **changes))

    def delete(self, vehicle_id: int) -> None:
        try:
            self.store.delete(vehicle_id)
        except VehicleNotFoundError as exc:
            raise NotFoundError(f"vehicle {vehicle_id} not found: {exc}") from exc
        logger.info("Deleted vehicle %d", vehicle_id)

    def find_by_color_and_year(self, color: str, year: int) -> dict[int, Vehicle]:
        try:
            return self.store.find_by_color_and_year(color, year)
        except VehicleNotFoundError as exc:
            raise NotFoundError(f"no vehicles with color {color} and year {year}: {exc}") from exc

    def find_by_brand_and_year_range(self, brand: str, year_range: tuple[int, int]) -> dict[int, Vehicle]:
        try:
            return self.store.find_by_brand_and_year_range(brand, year_range)
        except VehicleNotFoundError as exc:
            start, end = year_range
            raise NotFoundError(f"no {brand} vehicles between {start} and {end}: {exc}") from exc

    def find_by_fuel_type(self, fuel_type: str) -> dict[int, Vehicle]:
        try:
            return self.store.find_by_fuel_type(fuel_type)
        except VehicleNotFoundError as exc:
            raise NotFoundError(f"no vehicles with fuel type {fuel_type}: {exc}") from exc

    def find_by_transmission(self, transmission: str) -> dict[int, Vehicle]:
        try:
            return self.store.find_by_transmission(transmission)
        except VehicleNotFoundError as exc:
            raise NotFoundError(f"no vehicles with transmission {transmission}: {exc}") from exc

    def velocity_average_by_brand(self, brand: str) -> float:
        try:
            return self.store.velocity_average_by_brand(brand)
        except VehicleNotFoundError as exc:
            raise NotFoundError(f"no vehicles of brand {brand}: {exc}") from exc

    def capacity_average_by_brand(self, brand: str) -> float:
        try:
            return self.store.capacity_average_by_brand(brand)
        except VehicleNotFoundError as exc:
            raise NotFoundError(f"no vehicles of brand {brand}: {exc}") from exc

    # InvalidQueryError is reported as NotFoundError for compatibility with
    # existing clients.
    def find_query(self, query: DimensionQuery) -> dict[int, Vehicle]:
        try:
            return self.store.find_query(query)
        except InvalidQueryError as exc:
            raise NotFoundError(f"not found: {exc}") from exc

    def filter_by_weight(self, query: WeightQuery) -> dict[int, Vehicle]:
        try:
            return self.store.filter_by_weight(query)
        except InvalidQueryError as exc:
            raise NotFoundError(f"not found: {exc}") from exc
