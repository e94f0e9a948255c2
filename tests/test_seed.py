import json
from unittest.mock import patch

import pytest
from httpx import ASGITransport, AsyncClient

from fleet.main import app, lifespan
from fleet.seed import load_vehicles, seed_store
from fleet.services.vehicle_store import VehicleStore

RECORDS = [
    {"id": 4, "brand": "Toyota", "model": "Corolla", "color": "red", "year": 2020,
     "passengers": 5, "max_speed": 180.0, "transmission": "manual", "weight": 1300.0},
    {"id": 9, "brand": "Honda", "model": "Civic", "color": "blue", "year": 2018,
     "passengers": 5, "max_speed": 200.0, "transmission": "automatic"},
]


@pytest.fixture
def vehicles_file(tmp_path):
    path = tmp_path / "vehicles.json"
    path.write_text(json.dumps(RECORDS), encoding="utf-8")
    return path


def test_load_vehicles(vehicles_file):
    vehicles = load_vehicles(vehicles_file)

    assert sorted(vehicles) == [4, 9]
    assert vehicles[4].fabrication_year == 2020
    assert vehicles[9].capacity == 5
    assert vehicles[9].id == 9


def test_load_vehicles_duplicate_ids(tmp_path):
    path = tmp_path / "dup.json"
    path.write_text(json.dumps([RECORDS[0], RECORDS[0]]), encoding="utf-8")

    with pytest.raises(ValueError):
        load_vehicles(path)


def test_seed_store_moves_counter(vehicles_file, make_vehicle):
    store = VehicleStore()

    assert seed_store(store, vehicles_file) == 2
    vehicle = make_vehicle(model="Yaris")
    store.save(vehicle)
    assert vehicle.id == 10


def test_seed_store_skips_populated_store(vehicles_file, make_vehicle):
    store = VehicleStore()
    store.save(make_vehicle())

    assert seed_store(store, vehicles_file) == 0
    assert len(store) == 1


@pytest.mark.asyncio
async def test_lifespan_seeds_configured_file(vehicles_file):
    store = VehicleStore()
    with patch("fleet.main.settings") as mock_settings, patch("fleet.main.vehicle_store", store):
        mock_settings.vehicles_file = str(vehicles_file)
        async with lifespan(app):
            assert len(store) == 2


@pytest.mark.asyncio
async def test_seeded_vehicles_served(vehicles_file, store):
    seed_store(store, vehicles_file)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/v1/vehicles/9")

    assert response.status_code == 200
    assert response.json()["data"]["model"] == "Civic"


def test_load_vehicles_duplicate_key(tmp_path):
    path = tmp_path / "same_key.json"
    path.write_text(json.dumps([RECORDS[0], {**RECORDS[0], "id": 5, "color": "blue"}]), encoding="utf-8")

    with pytest.raises(ValueError, match="repeats brand, model and year"):
        load_vehicles(path)


def test_load_vehicles_missing_required_field(tmp_path):
    path = tmp_path / "no_brand.json"
    path.write_text(json.dumps([{**RECORDS[0], "brand": ""}]), encoding="utf-8")

    with pytest.raises(ValueError, match="field required: Brand"):
        load_vehicles(path)


def test_rejected_seed_leaves_store_empty(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps([RECORDS[0], {**RECORDS[1], "transmission": ""}]), encoding="utf-8")
    store = VehicleStore()

    with pytest.raises(ValueError):
        seed_store(store, path)
    assert len(store) == 0
