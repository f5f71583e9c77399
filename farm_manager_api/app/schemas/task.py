"""
Pydantic schemas for farm tasks.

Tasks are the only entity besides equipment whose updates are
partial: ``TaskUpdate`` makes every field optional and only the fields
actually supplied by the caller are sent to the store.
"""

from typing import Any, Optional

from pydantic import Field, field_validator

from .common import UIModel, blank_to_none


class TaskCreate(UIModel):
    """Schema for creating a task.

    New tasks always start uncompleted; completion is recorded through
    an update.
    """

    title: str
    type: Optional[str] = Field(None, description="Planting, Watering, Harvesting, ..., 'Other' by default")
    due_date: Optional[str] = None
    priority: Optional[str] = Field(None, description="Low, Medium or High")
    farm_id: int
    crop_id: Optional[int] = None

    @field_validator("crop_id", mode="before")
    @classmethod
    def _optional_reference(cls, v: Any) -> Any:
        return blank_to_none(v)


class TaskUpdate(UIModel):
    """Schema for updating a task.

    All fields are optional; only provided values will be updated.
    """

    title: Optional[str] = None
    type: Optional[str] = None
    due_date: Optional[str] = None
    priority: Optional[str] = None
    completed: Optional[bool] = None
    completed_date: Optional[str] = None
    farm_id: Optional[int] = None
    crop_id: Optional[int] = None

    @field_validator("farm_id", "crop_id", mode="before")
    @classmethod
    def _optional_reference(cls, v: Any) -> Any:
        return blank_to_none(v)


class TaskRead(UIModel):
    """Schema for reading a task."""

    id: int = Field(..., alias="Id")
    title: Optional[str] = None
    type: str = "Other"
    due_date: Optional[str] = None
    priority: str = "Medium"
    completed: bool = False
    completed_date: Optional[str] = None
    farm_id: Optional[int] = None
    crop_id: Optional[int] = None
