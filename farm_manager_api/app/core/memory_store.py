"""
In-memory implementation of ``RemoteDataClient``.

``InMemoryDataClient`` stands in for the hosted backend when running
the test-suite or working offline.  It speaks the same envelope
protocol as the real store: ids are assigned by the store, ``CreatedOn``
and ``ModifiedOn`` are stamped on write, reads honour ``where``,
``orderBy`` and ``pagingInfo``, and per-record failures are reported
inside ``results`` while the envelope itself succeeds.

Reference fields can be configured as *lookups* so that reads return
``{"Id": ..., "Name": ...}`` objects the way the hosted store does.
"""

from __future__ import annotations

import copy
import logging
import threading
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Mapping, Optional


logger = logging.getLogger(__name__)

SYSTEM_FIELDS = ("Id", "Name", "CreatedOn", "ModifiedOn")

_OPERATORS = {
    "EqualTo": lambda a, b: a == b,
    "NotEqualTo": lambda a, b: a != b,
    "GreaterThan": lambda a, b: a is not None and a > b,
    "GreaterThanOrEqualTo": lambda a, b: a is not None and a >= b,
    "LessThan": lambda a, b: a is not None and a < b,
    "LessThanOrEqualTo": lambda a, b: a is not None and a <= b,
}


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class InMemoryDataClient:
    """Process-local fake of the remote table store.

    Parameters
    ----------
    lookups : Optional[Dict[str, Dict[str, str]]]
        Per table, a mapping of reference field to referenced table,
        e.g. ``{"crop_c": {"farm_id_c": "farm_c"}}``.  Those fields are
        stored as bare ids and expanded into ``{Id, Name}`` on read.
    fail_tables : Optional[Iterable[str]]
        Tables for which every call answers with a failure envelope.
    """

    def __init__(
        self,
        lookups: Optional[Dict[str, Dict[str, str]]] = None,
        fail_tables: Optional[Iterable[str]] = None,
    ) -> None:
        self.lookups: Dict[str, Dict[str, str]] = lookups or {}
        self.fail_tables = set(fail_tables or ())
        self._tables: Dict[str, Dict[int, Dict[str, Any]]] = {}
        self._next_id: Dict[str, int] = {}
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _table(self, name: str) -> Dict[int, Dict[str, Any]]:
        return self._tables.setdefault(name, {})

    def _failure(self, table: str) -> Optional[Dict[str, Any]]:
        if table in self.fail_tables:
            return {"success": False, "message": f"Table {table} is unavailable"}
        return None

    def _expand(self, table: str, row: Dict[str, Any]) -> Dict[str, Any]:
        out = copy.deepcopy(row)
        for field_name, target in self.lookups.get(table, {}).items():
            ref = out.get(field_name)
            # Already expanded rows (seeded by hand) are served as stored.
            if ref is None or isinstance(ref, Mapping):
                continue
            target_row = self._table(target).get(ref)
            out[field_name] = {
                "Id": ref,
                "Name": target_row.get("Name") if target_row else None,
            }
        return out

    @staticmethod
    def _key(record_id: Any) -> Any:
        """Accept numeric-string ids the way the hosted store does."""
        if isinstance(record_id, str) and record_id.strip().isdigit():
            return int(record_id)
        return record_id

    @staticmethod
    def _project(row: Dict[str, Any], fields: List[str]) -> Dict[str, Any]:
        if not fields:
            return row
        wanted = {"Id", *fields}
        return {k: v for k, v in row.items() if k in wanted}

    @staticmethod
    def _field_names(params: Dict[str, Any]) -> List[str]:
        return [f["field"]["Name"] for f in params.get("fields", [])]

    @staticmethod
    def _matches(row: Dict[str, Any], where: List[Dict[str, Any]]) -> bool:
        for clause in where:
            op = _OPERATORS.get(clause["Operator"])
            if op is None:
                raise ValueError(f"Unsupported operator {clause['Operator']}")
            value = row.get(clause["FieldName"])
            if not any(op(value, candidate) for candidate in clause["Values"]):
                return False
        return True

    @staticmethod
    def _sort(rows: List[Dict[str, Any]], order_by: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        # Apply keys from least to most significant; sorted() is stable.
        for order in reversed(order_by):
            name = order["fieldName"]
            descending = order.get("sorttype", "ASC").upper() == "DESC"
            present = [r for r in rows if r.get(name) is not None]
            missing = [r for r in rows if r.get(name) is None]
            present.sort(key=lambda r: r[name], reverse=descending)
            rows = missing + present
        return rows

    def add_row(self, table: str, row: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a raw remote row, assigning ``Id`` and system timestamps.

        Useful for seeding the store with records whose shape the
        services would never write themselves (missing fields, embedded
        reference objects and so on).
        """
        with self._lock:
            return self._insert(table, row)

    def _insert(self, table: str, row: Dict[str, Any]) -> Dict[str, Any]:
        record_id = self._next_id.get(table, 1)
        self._next_id[table] = record_id + 1
        stamp = _now()
        stored = {"CreatedOn": stamp, "ModifiedOn": stamp, **copy.deepcopy(row), "Id": record_id}
        self._table(table)[record_id] = stored
        return self._expand(table, stored)

    # ------------------------------------------------------------------
    # RemoteDataClient
    # ------------------------------------------------------------------
    def fetch_many(self, table: str, params: Dict[str, Any]) -> Dict[str, Any]:
        failure = self._failure(table)
        if failure:
            return failure
        with self._lock:
            rows = [r for r in self._table(table).values() if self._matches(r, params.get("where", []))]
            rows = self._sort(rows, params.get("orderBy", []))
            paging = params.get("pagingInfo")
            if paging:
                offset = paging.get("offset", 0)
                rows = rows[offset:offset + paging["limit"]]
            fields = self._field_names(params)
            data = [self._project(self._expand(table, r), fields) for r in rows]
        logger.debug("fetch_many %s -> %d rows", table, len(data))
        return {"success": True, "data": data}

    def fetch_one(self, table: str, record_id: Any, params: Dict[str, Any]) -> Dict[str, Any]:
        failure = self._failure(table)
        if failure:
            return failure
        with self._lock:
            row = self._table(table).get(self._key(record_id))
            if row is None:
                return {"success": False, "message": f"Record with Id {record_id} not found"}
            data = self._project(self._expand(table, row), self._field_names(params))
        return {"success": True, "data": data}

    def insert_many(self, table: str, params: Dict[str, Any]) -> Dict[str, Any]:
        failure = self._failure(table)
        if failure:
            return failure
        with self._lock:
            results = [{"success": True, "data": self._insert(table, record)}
                       for record in params.get("records", [])]
        return {"success": True, "results": results}

    def update_many(self, table: str, params: Dict[str, Any]) -> Dict[str, Any]:
        failure = self._failure(table)
        if failure:
            return failure
        results = []
        with self._lock:
            rows = self._table(table)
            for record in params.get("records", []):
                record_id = self._key(record.get("Id"))
                if record_id not in rows:
                    results.append({
                        "success": False,
                        "message": f"Record with Id {record_id} not found",
                        "record": record,
                    })
                    continue
                changes = {k: v for k, v in record.items() if k != "Id"}
                rows[record_id].update(copy.deepcopy(changes))
                rows[record_id]["ModifiedOn"] = _now()
                results.append({"success": True, "data": self._expand(table, rows[record_id])})
        return {"success": True, "results": results}

    def delete_many(self, table: str, params: Dict[str, Any]) -> Dict[str, Any]:
        failure = self._failure(table)
        if failure:
            return failure
        results = []
        with self._lock:
            rows = self._table(table)
            for record_id in params.get("RecordIds", []):
                if rows.pop(self._key(record_id), None) is None:
                    results.append({"success": False, "message": f"Record with Id {record_id} not found"})
                else:
                    results.append({"success": True})
        return {"success": True, "results": results}
