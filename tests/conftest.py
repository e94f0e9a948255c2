import pytest

from fleet.dependencies import get_vehicle_service
from fleet.main import app
from fleet.models.vehicle import Vehicle
from fleet.services.vehicle_service import VehicleService
from fleet.services.vehicle_store import VehicleStore

COROLLA = {
    "brand": "Toyota",
    "model": "Corolla",
    "registration": "AB123CD",
    "color": "red",
    "fabrication_year": 2020,
    "capacity": 5,
    "max_speed": 180.0,
    "fuel_type": "gasoline",
    "transmission": "manual",
    "weight": 1300.0,
    "height": 1.45,
    "length": 4.6,
    "width": 1.78,
}


@pytest.fixture
def make_vehicle():
    def _make(**overrides) -> Vehicle:
        return Vehicle(**{**COROLLA, **overrides})

    return _make


@pytest.fixture
def store():
    return VehicleStore()


@pytest.fixture
def service(store):
    return VehicleService(store)


@pytest.fixture(autouse=True)
def override_vehicle_service(service):
    # Each test talks to its own empty store through the API.
    app.dependency_overrides[get_vehicle_service] = lambda: service
    yield
    app.dependency_overrides.clear()
