"""
Service layer abstraction.

Each service wraps one remote table.  Services receive the remote data
client through their constructor, so the hosted backend can be swapped
for ``InMemoryDataClient`` without touching any caller.
"""

from .base_service import EntityService, FieldMapping, ServiceResult, TableService
from .crop_service import CropService
from .equipment_service import EquipmentService
from .farm_service import FarmService
from .task_service import TaskService
from .transaction_service import TransactionService
from .weather_service import WeatherService

__all__ = [
    "EntityService",
    "FieldMapping",
    "ServiceResult",
    "TableService",
    "CropService",
    "EquipmentService",
    "FarmService",
    "TaskService",
    "TransactionService",
    "WeatherService",
]
