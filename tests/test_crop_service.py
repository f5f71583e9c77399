import asyncio

import pytest

from conftest import RecordingClient, batch
from farm_manager_api.app.services import CropService


@pytest.fixture
def farm(services):
    return asyncio.run(services.farms.create({"name": "Home", "size": 80})).unwrap()


def test_reference_is_normalized_from_embedded_object_or_bare_id(store, services):
    embedded = store.add_row("crop_c", {"crop_type_c": "Corn", "farm_id_c": {"Id": 7, "Name": "X"}})
    bare = store.add_row("crop_c", {"crop_type_c": "Soy", "farm_id_c": 7})

    first = asyncio.run(services.crops.get_by_id(embedded["Id"]))
    second = asyncio.run(services.crops.get_by_id(bare["Id"]))

    assert first.farm_id == 7
    assert second.farm_id == 7


def test_missing_status_defaults_to_planned(store, services):
    row = store.add_row("crop_c", {"Name": "Wheat", "farm_id_c": 1})

    crop = asyncio.run(services.crops.get_by_id(row["Id"]))

    assert crop.status == "Planned"
    assert crop.crop_type == "Wheat"
    assert crop.field == ""
    assert crop.notes == ""
    assert crop.planting_date is not None


def test_create_then_get_by_id_round_trips(services, farm):
    data = {
        "farmId": str(farm.id),
        "cropType": "Tomato",
        "field": "B2",
        "plantingDate": "2024-04-01",
        "expectedHarvest": "2024-08-15",
        "status": "Growing",
        "notes": "drip irrigation",
    }

    created = asyncio.run(services.crops.create(data)).unwrap()
    fetched = asyncio.run(services.crops.get_by_id(created.id))

    assert fetched == created
    assert fetched.farm_id == farm.id
    assert fetched.model_dump(by_alias=True, exclude={"id"}) == {**data, "farmId": farm.id}


def test_create_uses_crop_type_as_system_name():
    client = RecordingClient(batch({"success": True, "data": {"Id": 1, "crop_type_c": "Rice"}}))

    asyncio.run(CropService(client).create({"farmId": "2", "cropType": "Rice"}))

    (record,) = client.last_params["records"]
    assert record["Name"] == "Rice"
    assert record["farm_id_c"] == 2
    assert record["status_c"] is None


def test_get_all_lists_newest_first_with_lookup_references(store, services, farm):
    store.add_row("crop_c", {"crop_type_c": "Oats", "farm_id_c": farm.id, "CreatedOn": "2020-01-01T00:00:00"})
    store.add_row("crop_c", {"crop_type_c": "Barley", "farm_id_c": farm.id, "CreatedOn": "2021-01-01T00:00:00"})

    crops = asyncio.run(services.crops.get_all())

    assert [c.crop_type for c in crops] == ["Barley", "Oats"]
    assert all(c.farm_id == farm.id for c in crops)
