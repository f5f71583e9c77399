"""
Service for the ``task_c`` table.

Tasks are listed by due date, earliest first, so the UI can show what
is coming up next.  A new task always starts uncompleted; completion
is recorded through a partial update carrying ``completed`` and
``completed_date``.
"""

from __future__ import annotations

from typing import Any, Dict

from farm_manager_api.app.core.remote import OrderBy
from farm_manager_api.app.schemas.task import TaskCreate, TaskRead, TaskUpdate
from farm_manager_api.app.services.base_service import EntityService, FieldMapping, utc_now_iso


class TaskService(EntityService[TaskRead]):
    """CRUD access to farm tasks."""

    table_name = "task_c"
    label = "task"
    read_model = TaskRead
    create_model = TaskCreate
    update_model = TaskUpdate
    sparse_update = True
    order_by = (OrderBy(field_name="due_date_c", sort_type="ASC"),)
    fields = (
        FieldMapping("title", "title_c", fallback="Name"),
        FieldMapping("type", "type_c", default="Other"),
        FieldMapping("due_date", "due_date_c", default=utc_now_iso),
        FieldMapping("priority", "priority_c", default="Medium"),
        FieldMapping("completed", "completed_c", default=False),
        FieldMapping("completed_date", "completed_date_c"),
        FieldMapping("farm_id", "farm_id_c", reference=True),
        FieldMapping("crop_id", "crop_id_c", reference=True),
    )

    def system_fields(self, values: Dict[str, Any], creating: bool) -> Dict[str, Any]:
        extra: Dict[str, Any] = {}
        if "title" in values:
            extra["Name"] = values["title"]
        if creating:
            extra["completed_c"] = False
            extra["completed_date_c"] = None
        return extra
