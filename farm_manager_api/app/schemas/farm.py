"""
Pydantic schemas for farms.

A farm is the root of every other record: crops, tasks, transactions
and equipment all reference one through ``farmId``.
"""

from typing import Optional

from pydantic import Field

from .common import UIModel


class FarmCreate(UIModel):
    """Schema for creating a farm."""

    name: str = Field(..., description="Display name of the farm")
    size: float = Field(..., description="Farm area, expressed in ``size_unit``")
    size_unit: Optional[str] = Field(None, description="Area unit, 'acres' when omitted")
    location: Optional[str] = None


class FarmUpdate(FarmCreate):
    """Schema for updating a farm.

    Farm updates replace the whole record, so the same fields as for
    creation are required.
    """
    pass


class FarmRead(UIModel):
    """Schema for reading a farm."""

    id: int = Field(..., alias="Id")
    name: Optional[str] = None
    size: float = 0
    size_unit: str = "acres"
    location: str = ""
    created_at: Optional[str] = None
