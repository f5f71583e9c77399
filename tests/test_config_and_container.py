import importlib
import logging

import pytest

from apper_client import ApperClient
from farm_manager_api.app import build_services, get_services
from farm_manager_api.app.core import config
from farm_manager_api.app.core.logging_config import setup_logging
from farm_manager_api.app.core.memory_store import InMemoryDataClient
from farm_manager_api.app.core.remote import RemoteDataClient
from farm_manager_api.app.services import (
    CropService,
    EquipmentService,
    FarmService,
    TaskService,
    TransactionService,
    WeatherService,
)


@pytest.fixture
def reload_config():
    # Request before monkeypatch so the final reload sees the restored environment.
    yield lambda: importlib.reload(config)
    importlib.reload(config)


def test_settings_are_read_from_environment(reload_config, monkeypatch):
    monkeypatch.setenv("APPER_PROJECT_ID", "proj-42")
    monkeypatch.setenv("APPER_PUBLIC_KEY", "key-42")
    monkeypatch.setenv("APPER_BASE_URL", "https://example.test")
    monkeypatch.setenv("APPER_REQUEST_TIMEOUT", "2.5")
    monkeypatch.setenv("DEBUG", "yes")

    settings = reload_config().settings

    assert settings.apper_project_id == "proj-42"
    assert settings.apper_public_key == "key-42"
    assert settings.apper_base_url == "https://example.test"
    assert settings.request_timeout == 2.5
    assert settings.debug is True


def test_missing_credentials_are_not_validated_locally(reload_config, monkeypatch):
    monkeypatch.delenv("APPER_PROJECT_ID", raising=False)
    monkeypatch.delenv("APPER_PUBLIC_KEY", raising=False)

    settings = reload_config().settings

    assert settings.apper_project_id == ""
    assert settings.apper_public_key == ""


def test_build_services_shares_one_injected_client():
    client = InMemoryDataClient()

    services = build_services(client)

    assert isinstance(services.farms, FarmService)
    assert isinstance(services.crops, CropService)
    assert isinstance(services.tasks, TaskService)
    assert isinstance(services.transactions, TransactionService)
    assert isinstance(services.equipment, EquipmentService)
    assert isinstance(services.weather, WeatherService)
    clients = {id(s.client) for s in (services.farms, services.crops, services.tasks,
                                       services.transactions, services.equipment, services.weather)}
    assert clients == {id(client)}


def test_default_services_are_cached_and_use_http_client():
    get_services.cache_clear()
    try:
        services = get_services()
        assert get_services() is services
        assert isinstance(services.farms.client, ApperClient)
    finally:
        get_services.cache_clear()


def test_clients_satisfy_remote_protocol():
    assert isinstance(InMemoryDataClient(), RemoteDataClient)
    assert isinstance(ApperClient(project_id="p", public_key="k"), RemoteDataClient)


def test_setup_logging_configures_root_once(tmp_path):
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    try:
        logfile = tmp_path / "farm.log"
        assert setup_logging("debug", str(logfile)) is True
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2

        assert setup_logging("error") is False
        assert len(root.handlers) == 2
        assert root.level == logging.DEBUG
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)
