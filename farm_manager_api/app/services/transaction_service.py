"""
Service for the ``transaction_c`` table.

Transactions are listed by transaction date, most recent first.
Besides the usual CRUD operations the service can export the
transactions of a date range, which the finance views use for CSV
downloads.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from farm_manager_api.app.core.exceptions import FarmManagerException
from farm_manager_api.app.core.remote import OrderBy, WhereClause
from farm_manager_api.app.schemas.transaction import (
    TransactionCreate,
    TransactionRead,
    TransactionUpdate,
)
from farm_manager_api.app.services.base_service import (
    EntityService,
    FieldMapping,
    utc_now_iso,
)

logger = logging.getLogger(__name__)


class TransactionService(EntityService[TransactionRead]):
    """CRUD access to income and expense transactions."""

    table_name = "transaction_c"
    label = "transaction"
    read_model = TransactionRead
    create_model = TransactionCreate
    update_model = TransactionUpdate
    order_by = (OrderBy(field_name="date_c", sort_type="DESC"),)
    fields = (
        FieldMapping("type", "type_c", default="expense"),
        FieldMapping("category", "category_c", default=""),
        FieldMapping("amount", "amount_c", default=0),
        FieldMapping("date", "date_c", default=utc_now_iso),
        FieldMapping("description", "description_c", default=""),
        FieldMapping("farm_id", "farm_id_c", reference=True),
    )

    def system_fields(self, values: Dict[str, Any], creating: bool) -> Dict[str, Any]:
        return {"Name": f"{values['category']} - {values['amount']}"}

    async def export_data(
        self,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> List[TransactionRead]:
        """Return the transactions dated within ``[start_date, end_date]``.

        Either bound may be omitted; with neither, every transaction is
        returned.  Bounds are inclusive and compared by the remote store
        on ``date_c``.
        """
        where: List[WhereClause] = []
        if start_date:
            where.append(WhereClause(field_name="date_c", operator="GreaterThanOrEqualTo", values=[start_date]))
        if end_date:
            where.append(WhereClause(field_name="date_c", operator="LessThanOrEqualTo", values=[end_date]))
        try:
            return await self._fetch(self.fetch_params(where=where))
        except FarmManagerException:
            raise
        except Exception:
            logger.exception("Error exporting transactions")
            raise
