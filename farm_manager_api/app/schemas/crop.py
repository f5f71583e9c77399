"""
Pydantic schemas for crops planted on a farm field.
"""

from typing import Optional

from pydantic import Field

from .common import UIModel


class CropCreate(UIModel):
    """Schema for creating a crop."""

    farm_id: int = Field(..., description="Identifier of the farm the crop grows on")
    crop_type: str = Field(..., description="Kind of crop, e.g. 'Corn'")
    field: Optional[str] = None
    planting_date: Optional[str] = None
    expected_harvest: Optional[str] = None
    status: Optional[str] = Field(None, description="Planned, Growing, Harvested, ...")
    notes: Optional[str] = None


class CropUpdate(CropCreate):
    """Schema for updating a crop (full replacement)."""
    pass


class CropRead(UIModel):
    """Schema for reading a crop."""

    id: int = Field(..., alias="Id")
    farm_id: Optional[int] = None
    crop_type: Optional[str] = None
    field: str = ""
    planting_date: Optional[str] = None
    expected_harvest: Optional[str] = None
    status: str = "Planned"
    notes: str = ""
