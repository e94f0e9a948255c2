from fleet.services.vehicle_service import VehicleService
from fleet.services.vehicle_store import VehicleStore

vehicle_store = VehicleStore()
vehicle_service = VehicleService(vehicle_store)


def get_vehicle_service() -> VehicleService:
    return vehicle_service
