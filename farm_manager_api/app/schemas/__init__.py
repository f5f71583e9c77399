"""
Pydantic schema definitions for every entity.

Each domain (farms, crops, tasks, transactions, equipment, weather)
defines its own models for writing and reading records.  Schemas hold
the UI-facing field names; the mapping to the remote column names
lives with the corresponding service.
"""

from .crop import CropCreate, CropRead, CropUpdate
from .equipment import EquipmentCreate, EquipmentRead, EquipmentUpdate
from .farm import FarmCreate, FarmRead, FarmUpdate
from .task import TaskCreate, TaskRead, TaskUpdate
from .transaction import TransactionCreate, TransactionRead, TransactionUpdate
from .weather import WeatherRead

__all__ = [
    "CropCreate", "CropRead", "CropUpdate",
    "EquipmentCreate", "EquipmentRead", "EquipmentUpdate",
    "FarmCreate", "FarmRead", "FarmUpdate",
    "TaskCreate", "TaskRead", "TaskUpdate",
    "TransactionCreate", "TransactionRead", "TransactionUpdate",
    "WeatherRead",
]
