"""
Service for the ``crop_c`` table.

The crop type doubles as the record's system ``Name``.
"""

from __future__ import annotations

from typing import Any, Dict

from farm_manager_api.app.schemas.crop import CropCreate, CropRead, CropUpdate
from farm_manager_api.app.services.base_service import EntityService, FieldMapping, utc_now_iso


class CropService(EntityService[CropRead]):
    """CRUD access to crops."""

    table_name = "crop_c"
    label = "crop"
    read_model = CropRead
    create_model = CropCreate
    update_model = CropUpdate
    fields = (
        FieldMapping("farm_id", "farm_id_c", reference=True),
        FieldMapping("crop_type", "crop_type_c", fallback="Name"),
        FieldMapping("field", "field_c", default=""),
        FieldMapping("planting_date", "planting_date_c", default=utc_now_iso),
        FieldMapping("expected_harvest", "expected_harvest_c", default=utc_now_iso),
        FieldMapping("status", "status_c", default="Planned"),
        FieldMapping("notes", "notes_c", default=""),
    )

    def system_fields(self, values: Dict[str, Any], creating: bool) -> Dict[str, Any]:
        return {"Name": values["crop_type"]}
