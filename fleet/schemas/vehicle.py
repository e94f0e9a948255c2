from pydantic import BaseModel

from fleet.models.vehicle import Vehicle


class VehicleBody(BaseModel):
    model_config = {"allow_inf_nan": False}

    brand: str = ""
    model: str = ""
    registration: str = ""
    color: str = ""
    year: int = 0
    passengers: int = 0
    max_speed: float = 0.0
    fuel_type: str = ""
    transmission: str = ""
    weight: float = 0.0
    height: float = 0.0
    length: float = 0.0
    width: float = 0.0

    def to_vehicle(self, vehicle_id: int = 0) -> Vehicle:
        return Vehicle(
            id=vehicle_id,
            brand=self.brand,
            model=self.model,
            registration=self.registration,
            color=self.color,
            fabrication_year=self.year,
            capacity=self.passengers,
            max_speed=self.max_speed,
            fuel_type=self.fuel_type,
            transmission=self.transmission,
            weight=self.weight,
            height=self.height,
            length=self.length,
            width=self.width,
        )


class VehicleResponse(VehicleBody):
    id: int

    @classmethod
    def from_vehicle(cls, vehicle: Vehicle) -> "VehicleResponse":
        return cls(
            id=vehicle.id,
            brand=vehicle.brand,
            model=vehicle.model,
            registration=vehicle.registration,
            color=vehicle.color,
            year=vehicle.fabrication_year,
            passengers=vehicle.capacity,
            max_speed=vehicle.max_speed,
            fuel_type=vehicle.fuel_type,
            transmission=vehicle.transmission,
            weight=vehicle.weight,
            height=vehicle.height,
            length=vehicle.length,
            width=vehicle.width,
        )


class VehicleRecord(VehicleBody):
    """A vehicle as stored in a seed file, id included."""

    id: int

    def to_vehicle(self, vehicle_id: int | None = None) -> Vehicle:
        return super().to_vehicle(self.id if vehicle_id is None else vehicle_id)


class MaxSpeedUpdate(BaseModel):
    model_config = {"allow_inf_nan": False}

    max_speed: float


class FuelTypeUpdate(BaseModel):
    fuel_type: str


def vehicle_map(vehicles: dict[int, Vehicle]) -> dict[int, dict]:
    return {vid: VehicleResponse.from_vehicle(v).model_dump() for vid, v in vehicles.items()}
