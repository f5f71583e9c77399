import pytest

from farm_manager_api.app import build_services
from farm_manager_api.app.core.memory_store import InMemoryDataClient

LOOKUPS = {
    "crop_c": {"farm_id_c": "farm_c"},
    "task_c": {"farm_id_c": "farm_c", "crop_id_c": "crop_c"},
    "transaction_c": {"farm_id_c": "farm_c"},
    "equipment_c": {"farm_id_c": "farm_c"},
}


class RecordingClient:
    """Stub remote client: answers every call with ``response`` and records it."""

    def __init__(self, response=None):
        self.response = response if response is not None else {"success": True, "data": []}
        self.calls = []

    def _record(self, capability, table, *args):
        self.calls.append((capability, table, *args))
        if isinstance(self.response, Exception):
            raise self.response
        return self.response

    def fetch_many(self, table, params):
        return self._record("fetch_many", table, params)

    def fetch_one(self, table, record_id, params):
        return self._record("fetch_one", table, record_id, params)

    def insert_many(self, table, params):
        return self._record("insert_many", table, params)

    def update_many(self, table, params):
        return self._record("update_many", table, params)

    def delete_many(self, table, params):
        return self._record("delete_many", table, params)

    @property
    def last_params(self):
        return self.calls[-1][-1]


def batch(*results):
    """Build a successful envelope carrying per-record ``results``."""
    return {"success": True, "results": list(results)}


@pytest.fixture
def store():
    return InMemoryDataClient(lookups=LOOKUPS)


@pytest.fixture
def services(store):
    return build_services(store)


@pytest.fixture
def recorder():
    return RecordingClient()
