"""
Wiring of the entity services.

``build_services`` constructs one service per entity around a single
remote data client supplied by the caller; tests pass an
``InMemoryDataClient``.  ``get_services`` is the process-wide default
used by the application: it builds an ``ApperClient`` from
``Settings`` on first use and then keeps returning the same services.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from apper_client import ApperClient
from farm_manager_api.app.core.config import settings
from farm_manager_api.app.core.logging_config import setup_logging
from farm_manager_api.app.core.remote import RemoteDataClient
from farm_manager_api.app.services import (
    CropService,
    EquipmentService,
    FarmService,
    TaskService,
    TransactionService,
    WeatherService,
)


@dataclass(frozen=True)
class FarmServices:
    """One service per entity, all sharing the same remote client."""

    farms: FarmService
    crops: CropService
    tasks: TaskService
    transactions: TransactionService
    equipment: EquipmentService
    weather: WeatherService


def build_services(client: RemoteDataClient) -> FarmServices:
    """Create every entity service around ``client``."""
    return FarmServices(
        farms=FarmService(client),
        crops=CropService(client),
        tasks=TaskService(client),
        transactions=TransactionService(client),
        equipment=EquipmentService(client),
        weather=WeatherService(client),
    )


@lru_cache()
def get_services() -> FarmServices:
    """Return the cached services bound to the hosted backend."""
    setup_logging(settings.log_level, settings.log_file)
    client = ApperClient(
        project_id=settings.apper_project_id,
        public_key=settings.apper_public_key,
        base_url=settings.apper_base_url,
        timeout=settings.request_timeout,
    )
    return build_services(client)
