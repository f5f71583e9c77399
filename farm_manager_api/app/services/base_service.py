"""
Generic typed CRUD client over one remote table.

Every entity service is a subclass of ``TableService`` (read-only) or
``EntityService`` (full CRUD) that only declares *what* it stores:
the remote table, the mapping between UI attributes and remote
columns, the pydantic models used for reading and writing, and the
server-side ordering of list queries.  Building request descriptors,
checking envelopes, normalizing records and reconciling batch results
is shared here.

Normalization rules applied to every remote record:

* reference columns (``farm_id_c``, ``crop_id_c``) may come back as an
  embedded ``{"Id": ..., "Name": ...}`` object or as a bare id; both
  become the bare id;
* a column with a system fallback (``Name``, ``CreatedOn``) uses it
  when its own value is absent;
* defaults are substituted only when the value is absent (missing or
  ``None``).  ``0``, ``False`` and ``""`` are kept as they are.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, ClassVar, Dict, Generic, List, Mapping, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel

from farm_manager_api.app.core.exceptions import (
    FarmManagerException,
    NotFoundError,
    PartialBatchFailure,
    RemoteEnvelopeError,
    RemoteFetchError,
)
from farm_manager_api.app.core.remote import (
    Envelope,
    FetchParams,
    OrderBy,
    PagingInfo,
    RecordResult,
    RemoteDataClient,
    WhereClause,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def reference_id(value: Any) -> Any:
    """Return ``value["Id"]`` for an embedded lookup object, else ``value``."""
    if isinstance(value, Mapping) and "Id" in value:
        return value["Id"]
    return value


@dataclass(frozen=True)
class FieldMapping:
    """Links one UI attribute to its remote column.

    ``default`` may be a plain value or a zero-argument callable
    (e.g. "now" for dates) evaluated each time it is needed.
    """

    attr: str
    remote: str
    default: Any = None
    fallback: Optional[str] = None
    reference: bool = False

    def read(self, record: Mapping[str, Any]) -> Any:
        value = record.get(self.remote)
        if value is None and self.fallback:
            value = record.get(self.fallback)
        if self.reference:
            value = reference_id(value)
        if value is None:
            value = self.default() if callable(self.default) else self.default
        return value


@dataclass
class ServiceResult(Generic[T]):
    """Outcome of a create or update batch.

    ``data`` holds the mapped record when the store accepted it.  When
    nothing succeeded ``success`` is ``False`` and ``failures`` lists
    the per-record results reported by the store.
    """

    success: bool
    data: Optional[T] = None
    message: str = ""
    failures: List[RecordResult] = field(default_factory=list)

    @classmethod
    def success_result(cls, data: T, message: str = "",
                       failures: Optional[List[RecordResult]] = None) -> "ServiceResult[T]":
        return cls(success=True, data=data, message=message, failures=failures or [])

    @classmethod
    def error_result(cls, message: str,
                     failures: Optional[List[RecordResult]] = None) -> "ServiceResult[T]":
        return cls(success=False, message=message, failures=failures or [])

    def unwrap(self) -> T:
        """Return the record or raise ``PartialBatchFailure``."""
        if not self.success or self.data is None:
            raise PartialBatchFailure(self.message, self.failures)
        return self.data


class TableService(Generic[T]):
    """Read access to a remote table with record normalization."""

    table_name: ClassVar[str]
    label: ClassVar[str]
    fields: ClassVar[Sequence[FieldMapping]]
    read_model: ClassVar[Type[BaseModel]]
    order_by: ClassVar[Sequence[OrderBy]] = (OrderBy(field_name="CreatedOn", sort_type="DESC"),)
    has_identity: ClassVar[bool] = True

    def __init__(self, client: RemoteDataClient) -> None:
        self.client = client

    # ------------------------------------------------------------------
    # Mapping
    # ------------------------------------------------------------------
    @property
    def field_names(self) -> List[str]:
        """Remote columns requested on every read, ``Name`` first."""
        names = ["Name"]
        for mapping in self.fields:
            for column in (mapping.remote, mapping.fallback):
                if column and column not in names:
                    names.append(column)
        return names

    def to_entity(self, record: Mapping[str, Any]) -> T:
        """Normalize one remote record into the read model."""
        values: Dict[str, Any] = {}
        if self.has_identity:
            values["id"] = record.get("Id")
        for mapping in self.fields:
            values[mapping.attr] = mapping.read(record)
        return self.read_model.model_validate(values)

    def fetch_params(
        self,
        *,
        ordered: bool = True,
        limit: Optional[int] = None,
        where: Optional[List[WhereClause]] = None,
    ) -> FetchParams:
        return FetchParams(
            fields=self.field_names,
            order_by=list(self.order_by) if ordered else [],
            paging_info=PagingInfo(limit=limit, offset=0) if limit is not None else None,
            where=where or [],
        )

    # ------------------------------------------------------------------
    # Remote calls
    # ------------------------------------------------------------------
    async def _send(self, capability: str, *args: Any) -> Envelope:
        """Run one client capability off the event loop and parse the envelope."""
        method: Callable[..., Any] = getattr(self.client, capability)
        logger.debug("%s %s %s", capability, self.table_name, args)
        raw = await asyncio.to_thread(method, self.table_name, *args)
        return Envelope.model_validate(raw)

    def _check(self, envelope: Envelope, error_cls: Type[RemoteEnvelopeError]) -> None:
        if not envelope.success:
            message = envelope.message or f"Remote call on {self.table_name} failed"
            logger.error(message)
            raise error_cls(message, table=self.table_name)

    async def _fetch(self, params: FetchParams) -> List[T]:
        envelope = await self._send("fetch_many", params.to_wire())
        self._check(envelope, RemoteFetchError)
        return [self.to_entity(record) for record in envelope.data or []]


class EntityService(TableService[T]):
    """Full CRUD surface over a remote table.

    Subclasses set ``create_model`` / ``update_model`` and may override
    ``system_fields`` to add remote columns that have no UI attribute
    (``Name``, creation stamps, forced flags).  With ``sparse_update``
    only the attributes the caller supplied are sent on update;
    otherwise the update replaces the whole record.
    """

    create_model: ClassVar[Type[BaseModel]]
    update_model: ClassVar[Type[BaseModel]]
    sparse_update: ClassVar[bool] = False

    def system_fields(self, values: Dict[str, Any], creating: bool) -> Dict[str, Any]:
        """Extra remote columns derived from the validated input."""
        return {}

    def build_record(self, data: Any, creating: bool) -> Dict[str, Any]:
        """Validate caller input and translate it into a remote record."""
        model = self.create_model if creating else self.update_model
        if isinstance(data, model):
            validated = data
        elif isinstance(data, BaseModel):
            # e.g. an XCreate passed to update; unset fields stay unset.
            validated = model.model_validate(data.model_dump(exclude_unset=True))
        else:
            validated = model.model_validate(data)
        if self.sparse_update and not creating:
            values = validated.model_dump(include=validated.model_fields_set)
        else:
            values = validated.model_dump()
        record = {m.remote: values[m.attr] for m in self.fields if m.attr in values}
        record.update(self.system_fields(values, creating))
        return record

    def _reconcile(self, envelope: Envelope, verb: str) -> ServiceResult[T]:
        succeeded, failed = envelope.partition()
        empty = [r for r in succeeded if not r.data]
        if empty:
            succeeded = [r for r in succeeded if r.data]
            failed = failed + [
                r.model_copy(update={"success": False, "message": r.message or "Store returned no record data"})
                for r in empty
            ]
        if failed:
            logger.error(
                "Failed to %s %d %s records: %s",
                verb, len(failed), self.label, [f.model_dump() for f in failed],
            )
        if succeeded:
            return ServiceResult.success_result(self.to_entity(succeeded[0].data), failures=failed)
        return ServiceResult.error_result(f"No {self.label} record could be {verb}d", failed)

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------
    async def get_all(self) -> List[T]:
        """Return every record, in the entity's server-side order."""
        try:
            return await self._fetch(self.fetch_params())
        except FarmManagerException:
            raise
        except Exception:
            logger.exception("Error fetching %s records", self.label)
            raise

    async def get_by_id(self, record_id: Any) -> T:
        """Return a single record.  The id is passed to the store unchecked."""
        try:
            params = self.fetch_params(ordered=False)
            envelope = await self._send("fetch_one", record_id, params.to_wire())
            self._check(envelope, RemoteFetchError)
            if not envelope.data:
                raise NotFoundError(self.table_name, record_id)
            return self.to_entity(envelope.data)
        except FarmManagerException:
            raise
        except Exception:
            logger.exception("Error fetching %s with ID %s", self.label, record_id)
            raise

    async def create(self, data: Any) -> ServiceResult[T]:
        """Create one record and return the stored version."""
        try:
            record = self.build_record(data, creating=True)
            envelope = await self._send("insert_many", {"records": [record]})
            self._check(envelope, RemoteEnvelopeError)
            return self._reconcile(envelope, "create")
        except FarmManagerException:
            raise
        except Exception:
            logger.exception("Error creating %s", self.label)
            raise

    async def update(self, record_id: Any, data: Any) -> ServiceResult[T]:
        """Update one record and return the stored version."""
        try:
            record = {"Id": int(record_id), **self.build_record(data, creating=False)}
            envelope = await self._send("update_many", {"records": [record]})
            self._check(envelope, RemoteEnvelopeError)
            return self._reconcile(envelope, "update")
        except FarmManagerException:
            raise
        except Exception:
            logger.exception("Error updating %s %s", self.label, record_id)
            raise

    async def delete(self, record_id: Any) -> bool:
        """Delete one record.  ``False`` when the store reports it failed."""
        try:
            envelope = await self._send("delete_many", {"RecordIds": [int(record_id)]})
            self._check(envelope, RemoteEnvelopeError)
            _, failed = envelope.partition()
            if failed:
                logger.error(
                    "Failed to delete %d %s records: %s",
                    len(failed), self.label, [f.model_dump() for f in failed],
                )
                return False
            return True
        except FarmManagerException:
            raise
        except Exception:
            logger.exception("Error deleting %s %s", self.label, record_id)
            raise
