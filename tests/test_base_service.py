import asyncio

import pytest

from conftest import RecordingClient, batch
from farm_manager_api.app.core.exceptions import PartialBatchFailure
from farm_manager_api.app.services import FarmService, FieldMapping, ServiceResult
from farm_manager_api.app.services.base_service import reference_id


def test_reference_id_extracts_embedded_id_only():
    assert reference_id({"Id": 7, "Name": "X"}) == 7
    assert reference_id(7) == 7
    assert reference_id("7") == "7"
    assert reference_id(None) is None


def test_field_mapping_defaults_only_when_absent():
    mapping = FieldMapping("humidity", "humidity_c", default=60)

    assert mapping.read({}) == 60
    assert mapping.read({"humidity_c": None}) == 60
    assert mapping.read({"humidity_c": 0}) == 0


def test_field_mapping_callable_default_and_fallback():
    stamps = iter(["first", "second"])
    mapping = FieldMapping("created_at", "created_at_c", default=lambda: next(stamps), fallback="CreatedOn")

    assert mapping.read({"CreatedOn": "2024-01-01"}) == "2024-01-01"
    assert mapping.read({}) == "first"
    assert mapping.read({}) == "second"


def test_field_names_are_requested_once_with_name_first(recorder):
    names = FarmService(recorder).field_names

    assert names[0] == "Name"
    assert len(names) == len(set(names))
    assert "CreatedOn" in names


def test_partially_failed_batch_returns_first_success_and_keeps_failures():
    client = RecordingClient(batch(
        {"success": False, "message": "Duplicate name"},
        {"success": True, "data": {"Id": 11, "name_c": "Ok farm"}},
    ))

    result = asyncio.run(FarmService(client).create({"name": "Ok farm", "size": 3}))

    assert result.success
    assert result.data.id == 11
    assert [f.message for f in result.failures] == ["Duplicate name"]


def test_fully_failed_batch_is_an_explicit_failure():
    failure = {"success": False, "message": "size_c is required", "errors": [{"fieldLabel": "size"}]}
    client = RecordingClient(batch(failure))

    result = asyncio.run(FarmService(client).create({"name": "Bad", "size": 0}))

    assert not result.success
    assert result.data is None
    assert result.failures[0].errors == [{"fieldLabel": "size"}]
    with pytest.raises(PartialBatchFailure) as info:
        result.unwrap()
    assert info.value.failures == result.failures


def test_batch_without_results_is_a_failure_too():
    result = asyncio.run(FarmService(RecordingClient({"success": True})).create({"name": "A", "size": 1}))

    assert not result.success
    assert result.failures == []


def test_unexpected_client_errors_propagate_unchanged():
    service = FarmService(RecordingClient(RuntimeError("socket closed")))

    with pytest.raises(RuntimeError, match="socket closed"):
        asyncio.run(service.get_all())
    with pytest.raises(RuntimeError, match="socket closed"):
        asyncio.run(service.delete(1))


def test_non_numeric_id_fails_before_dispatch():
    client = RecordingClient(batch({"success": True}))

    with pytest.raises(ValueError):
        asyncio.run(FarmService(client).delete("abc"))
    assert client.calls == []


def test_service_result_constructors():
    ok = ServiceResult.success_result("payload", message="done")
    assert ok.unwrap() == "payload"
    assert ok.failures == []

    failed = ServiceResult.error_result("nothing stored")
    assert not failed.success
    with pytest.raises(PartialBatchFailure, match="nothing stored"):
        failed.unwrap()


def test_concurrent_creates_are_independent(services):
    async def create_many():
        return await asyncio.gather(*(
            services.farms.create({"name": f"Farm {i}", "size": i}) for i in range(10)
        ))

    results = asyncio.run(create_many())

    ids = {r.unwrap().id for r in results}
    assert ids == set(range(1, 11))
    assert len(asyncio.run(services.farms.get_all())) == 10


def test_success_without_record_data_counts_as_failure():
    client = RecordingClient(batch({"success": True}))

    result = asyncio.run(FarmService(client).create({"name": "Ghost", "size": 1}))

    assert not result.success
    assert result.data is None
    (failure,) = result.failures
    assert failure.success is False
    assert failure.message == "Store returned no record data"
