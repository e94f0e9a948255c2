"""In-memory vehicle table with id allocation, queries and aggregates.

Every read and write goes through one re-entrant lock, so the
check-increment-insert sequence of ``save`` is atomic with respect to
concurrent callers. Callers only ever receive copies of stored records.
"""
import logging
import threading
from collections.abc import Callable, Iterable
from dataclasses import replace

from fleet.models.vehicle import Vehicle
from fleet.schemas.criteria import DimensionQuery, WeightQuery
from fleet.utils.exceptions import (
    InvalidQueryError,
    VehicleAlreadyExistsError,
    VehicleNotFoundError,
)

logger = logging.getLogger(__name__)


class VehicleStore:
    def __init__(self, db: dict[int, Vehicle] | None = None, last_id: int = 0):
        self._db: dict[int, Vehicle] = {}
        self._last_id = last_id
        self._lock = threading.RLock()
        if db:
            self.load(db)

    def load(self, vehicles: dict[int, Vehicle]) -> None:
        """Replace the table with ``vehicles``, keyed by id."""
        with self._lock:
            self._db = {vid: replace(v, id=vid) for vid, v in vehicles.items()}
            # Loaded ids must never be handed out again.
            self._last_id = max([self._last_id, *self._db])

    @property
    def last_id(self) -> int:
        with self._lock:
            return self._last_id

    def __len__(self) -> int:
        with self._lock:
            return len(self._db)

    def find_all(self) -> dict[int, Vehicle]:
        with self._lock:
            return {vid: replace(v) for vid, v in self._db.items()}

    def get_by_id(self, vehicle_id: int) -> Vehicle:
        with self._lock:
            vehicle = self._db.get(vehicle_id)
            if vehicle is None:
                raise VehicleNotFoundError()
            return replace(vehicle)

    def save(self, vehicle: Vehicle) -> None:
        """Assign the next id to ``vehicle`` and insert a copy of it."""
        with self._lock:
            for existing in self._db.values():
                if existing.key == vehicle.key:
                    raise VehicleAlreadyExistsError()
            self._last_id += 1
            vehicle.id = self._last_id
            self._db[vehicle.id] = replace(vehicle)
        logger.debug("Saved vehicle %d (%s %s %d)", vehicle.id, *vehicle.key)

    def save_many(self, vehicles: Iterable[Vehicle]) -> None:
        """Save in order, stopping at the first failure.

        Vehicles saved before the failure stay in the table.
        """
        with self._lock:
            for vehicle in vehicles:
                self.save(vehicle)

    def update_vehicle(self, vehicle: Vehicle) -> None:
        with self._lock:
            if vehicle.id not in self._db:
                raise VehicleNotFoundError()
            self._db[vehicle.id] = replace(vehicle)

    def delete(self, vehicle_id: int) -> None:
        with self._lock:
            if vehicle_id not in self._db:
                raise VehicleNotFoundError()
            del self._db[vehicle_id]
        logger.debug("Deleted vehicle %d", vehicle_id)

    def _select(self, predicate: Callable[[Vehicle], bool]) -> dict[int, Vehicle]:
        with self._lock:
            return {vid: replace(v) for vid, v in self._db.items() if predicate(v)}

    def _select_or_raise(self, predicate: Callable[[Vehicle], bool]) -> dict[int, Vehicle]:
        vehicles = self._select(predicate)
        if not vehicles:
            raise VehicleNotFoundError()
        return vehicles

    def find_by_color_and_year(self, color: str, year: int) -> dict[int, Vehicle]:
        return self._select_or_raise(lambda v: v.color == color and v.fabrication_year == year)

    def find_by_brand_and_year_range(self, brand: str, year_range: tuple[int, int]) -> dict[int, Vehicle]:
        start, end = year_range
        return self._select_or_raise(
            lambda v: v.brand == brand and start <= v.fabrication_year <= end
        )

    def find_by_fuel_type(self, fuel_type: str) -> dict[int, Vehicle]:
        return self._select_or_raise(lambda v: v.fuel_type == fuel_type)

    def find_by_transmission(self, transmission: str) -> dict[int, Vehicle]:
        return self._select_or_raise(lambda v: v.transmission == transmission)

    def _average_by_brand(self, brand: str, attribute: Callable[[Vehicle], float]) -> float:
        total = 0.0
        count = 0
        with self._lock:
            for vehicle in self._db.values():
                if vehicle.brand == brand:
                    total += attribute(vehicle)
                    count += 1
        if count == 0:
            raise VehicleNotFoundError()
        return total / count

    def velocity_average_by_brand(self, brand: str) -> float:
        return self._average_by_brand(brand, lambda v: v.max_speed)

    def capacity_average_by_brand(self, brand: str) -> float:
        return self._average_by_brand(brand, lambda v: float(v.capacity))

    def find_query(self, query: DimensionQuery) -> dict[int, Vehicle]:
        """Filter on dimension bounds, all inclusive.

        The length bounds are checked against ``height``; existing clients
        depend on this.
        """
        if query.is_empty():
            return self.find_all()
        missing = query.missing()
        if missing:
            raise InvalidQueryError(f"invalid query: missing {', '.join(missing)}")
        return self._select(
            lambda v: query.min_length <= v.height <= query.max_length
            and query.min_width <= v.width <= query.max_width
        )

    def filter_by_weight(self, query: WeightQuery) -> dict[int, Vehicle]:
        if query.is_empty():
            return self.find_all()
        missing = query.missing()
        if missing:
            raise InvalidQueryError(f"invalid query: missing {', '.join(missing)}")
        return self._select(lambda v: query.weight_min <= v.weight <= query.weight_max)
