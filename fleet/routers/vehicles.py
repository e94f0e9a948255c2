from fastapi import APIRouter, Depends

from fleet.dependencies import get_vehicle_service
from fleet.schemas.criteria import DimensionQuery, WeightQuery
from fleet.schemas.vehicle import (
    FuelTypeUpdate,
    MaxSpeedUpdate,
    VehicleBody,
    VehicleResponse,
    vehicle_map,
)
from fleet.services.vehicle_service import VehicleService
from fleet.utils.response import success_response

router = APIRouter(prefix="/vehicles", tags=["vehicles"])

# Fixed paths are declared before "/{vehicle_id}" so they are matched first.


@router.get("")
async def get_vehicles(
    min_length: float | None = None,
    max_length: float | None = None,
    min_width: float | None = None,
    max_width: float | None = None,
    service: VehicleService = Depends(get_vehicle_service),
):
    query = DimensionQuery(
        min_length=min_length,
        max_length=max_length,
        min_width=min_width,
        max_width=max_width,
    )
    vehicles = service.find_query(query)
    return success_response(data=vehicle_map(vehicles))


@router.get("/weight")
async def filter_by_weight(
    weight_min: float | None = None,
    weight_max: float | None = None,
    service: VehicleService = Depends(get_vehicle_service),
):
    vehicles = service.filter_by_weight(WeightQuery(weight_min=weight_min, weight_max=weight_max))
    return success_response(data=vehicle_map(vehicles))


@router.get("/color/{color}/year/{year}")
async def find_by_color_and_year(
    color: str, year: int, service: VehicleService = Depends(get_vehicle_service)
):
    vehicles = service.find_by_color_and_year(color, year)
    return success_response(data=vehicle_map(vehicles))


@router.get("/brand/{brand}/between/{start_year}/{end_year}")
async def find_by_brand_and_year_range(
    brand: str,
    start_year: int,
    end_year: int,
    service: VehicleService = Depends(get_vehicle_service),
):
    vehicles = service.find_by_brand_and_year_range(brand, (start_year, end_year))
    return success_response(data=vehicle_map(vehicles))


@router.get("/average_speed/brand/{brand}")
async def velocity_average_by_brand(brand: str, service: VehicleService = Depends(get_vehicle_service)):
    average = service.velocity_average_by_brand(brand)
    return success_response(data={"brand": brand, "average_speed": average})


@router.get("/average_capacity/brand/{brand}")
async def capacity_average_by_brand(brand: str, service: VehicleService = Depends(get_vehicle_service)):
    average = service.capacity_average_by_brand(brand)
    return success_response(data={"brand": brand, "average_capacity": average})


@router.get("/fuel_type/{fuel_type}")
async def find_by_fuel_type(fuel_type: str, service: VehicleService = Depends(get_vehicle_service)):
    vehicles = service.find_by_fuel_type(fuel_type)
    return success_response(data=vehicle_map(vehicles))


@router.get("/transmission/{transmission}")
async def find_by_transmission(transmission: str, service: VehicleService = Depends(get_vehicle_service)):
    vehicles = service.find_by_transmission(transmission)
    return success_response(data=vehicle_map(vehicles))


@router.post("/batch", status_code=201)
async def create_vehicles(
    payload: list[VehicleBody], service: VehicleService = Depends(get_vehicle_service)
):
    saved = service.save_many([item.to_vehicle() for item in payload])
    data = [VehicleResponse.from_vehicle(v).model_dump() for v in saved]
    return success_response(data=data, message=f"{len(saved)} vehicles created")


@router.get("/{vehicle_id}")
async def get_vehicle(vehicle_id: int, service: VehicleService = Depends(get_vehicle_service)):
    vehicle = service.get_by_id(vehicle_id)
    return success_response(data=VehicleResponse.from_vehicle(vehicle).model_dump())


@router.post("", status_code=201)
async def create_vehicle(payload: VehicleBody, service: VehicleService = Depends(get_vehicle_service)):
    vehicle = service.save(payload.to_vehicle())
    return success_response(data=VehicleResponse.from_vehicle(vehicle).model_dump(), message="Vehicle created")


@router.put("/{vehicle_id}")
async def update_vehicle(
    vehicle_id: int, payload: VehicleBody, service: VehicleService = Depends(get_vehicle_service)
):
    vehicle = service.update_vehicle(payload.to_vehicle(vehicle_id))
    return success_response(data=VehicleResponse.from_vehicle(vehicle).model_dump(), message="Vehicle updated")


@router.put("/{vehicle_id}/max_speed")
async def update_max_speed(
    vehicle_id: int, payload: MaxSpeedUpdate, service: VehicleService = Depends(get_vehicle_service)
):
    vehicle = service.update_fields(vehicle_id, max_speed=payload.max_speed)
    return success_response(data=VehicleResponse.from_vehicle(vehicle).model_dump(), message="Vehicle updated")


@router.put("/{vehicle_id}/fuel_type")
async def update_fuel_type(
    vehicle_id: int, payload: FuelTypeUpdate, service: VehicleService = Depends(get_vehicle_service)
):
    vehicle = service.update_fields(vehicle_id, fuel_type=payload.fuel_type)
    return success_response(data=VehicleResponse.from_vehicle(vehicle).model_dump(), message="Vehicle updated")


@router.delete("/{vehicle_id}")
async def delete_vehicle(vehicle_id: int, service: VehicleService = Depends(get_vehicle_service)):
    service.delete(vehicle_id)
    return success_response(data=None, message="Vehicle deleted")
