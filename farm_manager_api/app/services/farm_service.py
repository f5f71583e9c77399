"""
Service for the ``farm_c`` table.

Farms are listed newest first.  On creation the record is stamped
with ``created_at_c``; updates replace the whole record.
"""

from __future__ import annotations

from typing import Any, Dict

from farm_manager_api.app.schemas.farm import FarmCreate, FarmRead, FarmUpdate
from farm_manager_api.app.services.base_service import EntityService, FieldMapping, utc_now_iso


class FarmService(EntityService[FarmRead]):
    """CRUD access to farms."""

    table_name = "farm_c"
    label = "farm"
    read_model = FarmRead
    create_model = FarmCreate
    update_model = FarmUpdate
    fields = (
        FieldMapping("name", "name_c", fallback="Name"),
        FieldMapping("size", "size_c", default=0),
        FieldMapping("size_unit", "size_unit_c", default="acres"),
        FieldMapping("location", "location_c", default=""),
        FieldMapping("created_at", "created_at_c", fallback="CreatedOn"),
    )

    def system_fields(self, values: Dict[str, Any], creating: bool) -> Dict[str, Any]:
        extra = {"Name": values["name"]}
        if creating:
            extra["created_at_c"] = utc_now_iso()
        return extra
