"""
Service for the ``equipment_c`` table.

Equipment updates are partial: only the attributes present in the
caller's input are written, so a maintenance form can update
``last_maintenance`` without resending prices or hours.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict

from farm_manager_api.app.schemas.equipment import EquipmentCreate, EquipmentRead, EquipmentUpdate
from farm_manager_api.app.services.base_service import EntityService, FieldMapping, utc_now_iso


def _current_year() -> int:
    return datetime.now().year


class EquipmentService(EntityService[EquipmentRead]):
    """CRUD access to farm equipment."""

    table_name = "equipment_c"
    label = "equipment"
    read_model = EquipmentRead
    create_model = EquipmentCreate
    update_model = EquipmentUpdate
    sparse_update = True
    fields = (
        FieldMapping("name", "name_c", fallback="Name"),
        FieldMapping("type", "type_c", default=""),
        FieldMapping("brand", "brand_c", default=""),
        FieldMapping("model", "model_c", default=""),
        FieldMapping("year", "year_c", default=_current_year),
        FieldMapping("status", "status_c", default="Active"),
        FieldMapping("farm_id", "farm_id_c", reference=True),
        FieldMapping("purchase_price", "purchase_price_c", default=0),
        FieldMapping("current_value", "current_value_c", default=0),
        FieldMapping("maintenance_schedule", "maintenance_schedule_c", default=""),
        FieldMapping("operating_hours", "operating_hours_c", default=0),
        FieldMapping("fuel_type", "fuel_type_c", default="Diesel"),
        FieldMapping("specifications", "specifications_c", default=""),
        FieldMapping("created_at", "created_at_c", fallback="CreatedOn"),
        FieldMapping("last_maintenance", "last_maintenance_c"),
        FieldMapping("next_maintenance", "next_maintenance_c"),
    )

    def system_fields(self, values: Dict[str, Any], creating: bool) -> Dict[str, Any]:
        extra: Dict[str, Any] = {}
        if "name" in values:
            extra["Name"] = values["name"]
        if creating:
            extra["created_at_c"] = utc_now_iso()
        return extra
