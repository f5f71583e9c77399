"""
Pydantic schemas for farm equipment (tractors, harvesters, pumps, ...).

Optional numeric fields accept an empty string from a form and store
it as ``None`` rather than ``0``.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field, field_validator

from .common import UIModel, blank_to_none

_OPTIONAL_NUMBERS = ("year", "farm_id", "purchase_price", "current_value", "operating_hours")


class EquipmentCreate(UIModel):
    """Schema for registering a piece of equipment."""

    name: str
    type: Optional[str] = None
    brand: Optional[str] = None
    model: Optional[str] = None
    year: Optional[int] = None
    status: Optional[str] = Field(None, description="Active, Maintenance, Retired, ...")
    farm_id: Optional[int] = None
    purchase_price: Optional[float] = None
    current_value: Optional[float] = None
    maintenance_schedule: Optional[str] = None
    operating_hours: Optional[int] = None
    fuel_type: Optional[str] = Field(None, description="Diesel, Gasoline, Electric, ...")
    specifications: Optional[str] = None

    @field_validator(*_OPTIONAL_NUMBERS, mode="before")
    @classmethod
    def _blank_numbers(cls, v: Any) -> Any:
        return blank_to_none(v)


class EquipmentUpdate(EquipmentCreate):
    """Schema for updating equipment.

    All fields are optional; only provided values will be updated.
    """

    name: Optional[str] = None
    last_maintenance: Optional[str] = None
    next_maintenance: Optional[str] = None


class EquipmentRead(UIModel):
    """Schema for reading a piece of equipment."""

    id: int = Field(..., alias="Id")
    name: Optional[str] = None
    type: str = ""
    brand: str = ""
    model: str = ""
    year: int = Field(default_factory=lambda: datetime.now().year)
    status: str = "Active"
    farm_id: Optional[int] = None
    purchase_price: Optional[float] = 0
    current_value: Optional[float] = 0
    maintenance_schedule: str = ""
    operating_hours: Optional[int] = 0
    fuel_type: str = "Diesel"
    specifications: str = ""
    created_at: Optional[str] = None
    last_maintenance: Optional[str] = None
    next_maintenance: Optional[str] = None
