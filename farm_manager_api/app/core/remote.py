"""
Contract between the entity services and the remote data store.

The store is reached through any object implementing
``RemoteDataClient``: five table-level capabilities, each taking a
wire-shaped parameter mapping and answering with an envelope mapping
``{success, message, data | results}``.  ``apper_client.ApperClient``
talks to the real backend over HTTP; ``InMemoryDataClient`` keeps the
rows in process for tests.

The request descriptor models below build the wire parameters, and the
envelope models parse whatever comes back.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field


@runtime_checkable
class RemoteDataClient(Protocol):
    """Narrow capability interface over a backend-as-a-service table API."""

    def fetch_many(self, table: str, params: Dict[str, Any]) -> Dict[str, Any]:
        ...

    def fetch_one(self, table: str, record_id: Any, params: Dict[str, Any]) -> Dict[str, Any]:
        ...

    def insert_many(self, table: str, params: Dict[str, Any]) -> Dict[str, Any]:
        ...

    def update_many(self, table: str, params: Dict[str, Any]) -> Dict[str, Any]:
        ...

    def delete_many(self, table: str, params: Dict[str, Any]) -> Dict[str, Any]:
        ...


# ----------------------------------------------------------------------
# Request descriptors
# ----------------------------------------------------------------------
class OrderBy(BaseModel):
    """Server-side ordering on one field."""

    field_name: str = Field(..., alias="fieldName")
    sort_type: str = Field("DESC", alias="sorttype")

    model_config = ConfigDict(populate_by_name=True)


class PagingInfo(BaseModel):
    limit: int
    offset: int = 0


class WhereClause(BaseModel):
    """A single filter condition, e.g. ``date_c GreaterThanOrEqualTo ['2024-01-01']``."""

    field_name: str = Field(..., alias="FieldName")
    operator: str = Field(..., alias="Operator")
    values: List[Any] = Field(..., alias="Values")

    model_config = ConfigDict(populate_by_name=True)


class FetchParams(BaseModel):
    """Parameters of a ``fetch_many`` / ``fetch_one`` call."""

    fields: List[str]
    order_by: List[OrderBy] = Field(default_factory=list)
    paging_info: Optional[PagingInfo] = None
    where: List[WhereClause] = Field(default_factory=list)

    def to_wire(self) -> Dict[str, Any]:
        """Render the parameters in the shape the remote API expects.

        Optional sections are left out entirely when empty so that a
        single-record read carries nothing but its field list.
        """
        payload: Dict[str, Any] = {
            "fields": [{"field": {"Name": name}} for name in self.fields],
        }
        if self.order_by:
            payload["orderBy"] = [o.model_dump(by_alias=True) for o in self.order_by]
        if self.paging_info is not None:
            payload["pagingInfo"] = self.paging_info.model_dump()
        if self.where:
            payload["where"] = [w.model_dump(by_alias=True) for w in self.where]
        return payload


# ----------------------------------------------------------------------
# Response envelope
# ----------------------------------------------------------------------
class RecordResult(BaseModel):
    """Outcome of one record inside a create/update/delete batch."""

    success: bool
    data: Optional[Dict[str, Any]] = None
    message: Optional[str] = None
    errors: Optional[List[Any]] = None

    model_config = ConfigDict(extra="allow")


class Envelope(BaseModel):
    """Uniform wrapper returned by every remote call."""

    success: bool
    message: Optional[str] = None
    data: Any = None
    results: Optional[List[RecordResult]] = None

    model_config = ConfigDict(extra="allow")

    def partition(self) -> tuple[List[RecordResult], List[RecordResult]]:
        """Split per-record results into ``(succeeded, failed)``."""
        results = self.results or []
        succeeded = [r for r in results if r.success]
        failed = [r for r in results if not r.success]
        return succeeded, failed
