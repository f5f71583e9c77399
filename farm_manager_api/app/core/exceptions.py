"""
Exception classes for the farm manager data-access layer.

Every error raised on purpose by a service derives from
``FarmManagerException`` and carries the human readable message plus a
``details`` mapping with whatever the remote store reported.
"""

from typing import Any, Dict, List, Optional


class FarmManagerException(Exception):
    """Base exception class for the data-access layer."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class RemoteEnvelopeError(FarmManagerException):
    """The remote call itself answered with ``success: false``."""

    def __init__(self, message: str, table: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        self.table = table
        super().__init__(message, details)


class RemoteFetchError(RemoteEnvelopeError):
    """A read (list, single record or export) was rejected by the remote store."""
    pass


class NotFoundError(FarmManagerException):
    """A single-record read succeeded but returned no record."""

    def __init__(self, table: str, record_id: Any):
        self.table = table
        self.record_id = record_id
        super().__init__(
            f"Record {record_id} not found in {table}",
            {"table": table, "record_id": record_id},
        )


class PartialBatchFailure(FarmManagerException):
    """Some records of a batch failed although the envelope succeeded.

    Services never raise this for create/update; it is raised by
    ``ServiceResult.unwrap`` when the caller asks for the entity of a
    batch in which nothing succeeded.
    """

    def __init__(self, message: str, failures: Optional[List[Any]] = None):
        self.failures = failures or []
        super().__init__(message, {"failures": self.failures})
