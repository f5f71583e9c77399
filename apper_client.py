"""Remote data client for the hosted farm-manager backend.

This module defines a small client around the table API of the
backend-as-a-service project that stores the farm manager's records.
It implements the ``RemoteDataClient`` capabilities used by the entity
services:

* :meth:`ApperClient.fetch_many` – query a table (fields, ordering,
  paging, filters).
* :meth:`ApperClient.fetch_one` – read a single record by id.
* :meth:`ApperClient.insert_many` – create a batch of records.
* :meth:`ApperClient.update_many` – update a batch of records.
* :meth:`ApperClient.delete_many` – delete a batch of records by id.

Every call answers with the store's envelope
``{success, message, data | results}``.  Transport errors and HTTP
error statuses are converted into a failure envelope carrying a
readable message instead of being raised, so callers handle every
remote failure the same way.

The project identifier and public key are sent as headers on every
request.  They are not validated locally: a missing or wrong value
comes back as a failure envelope from the server.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests


logger = logging.getLogger(__name__)


class ApperClient:
    """Client for the remote table API.

    Paths are resolved under ``{base_url}/tables/{table}/records``.
    The client keeps no state between calls apart from its HTTP
    session, and never retries a failed request.
    """

    def __init__(
        self,
        *,
        project_id: str,
        public_key: str,
        base_url: str = "https://api.apper.io",
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the client.

        Args:
            project_id: Identifier of the remote project.
            public_key: Public API key of the remote project.
            base_url: Root URL of the remote API.
            timeout: Seconds to wait for a response before the call is
                reported as failed.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.project_id = project_id
        self.public_key = public_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _records_path(self, table: str) -> str:
        return f"/tables/{table}/records"

    def _request(self, method: str, path: str, json_body: Any | None = None) -> Dict[str, Any]:
        """Perform an HTTP request and return the response envelope.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url`.
            json_body: JSON body to send with the request.
        Returns:
            The envelope parsed from the response body.  On failure a
            synthetic envelope ``{"success": False, "message": ...}``
            is returned.
        """
        url = f"{self.base_url}{path}"
        headers = {
            "X-Apper-Project-Id": self.project_id,
            "X-Apper-Public-Key": self.public_key,
        }
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if not response.content:
                return {"success": True}
            payload = response.json()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = err_json.get("message") or err_json.get("detail") or str(err_json)
                    else:
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("Remote request failed (%s): %s", status, message)
            return {"success": False, "message": message, "status_code": status}
        except requests.RequestException as exc:
            logger.error("Remote request failed: %s", exc)
            return {"success": False, "message": str(exc)}
        except ValueError as exc:
            logger.error("Remote response from %s is not valid JSON: %s", url, exc)
            return {"success": False, "message": f"Invalid response from remote store: {exc}"}
        if not isinstance(payload, dict) or "success" not in payload:
            return {"success": False, "message": "Unexpected response shape from remote store"}
        return payload

    # ------------------------------------------------------------------
    # Table operations
    # ------------------------------------------------------------------
    def fetch_many(self, table: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """Query ``table`` with fields, ordering, paging and filters."""
        return self._request("POST", f"{self._records_path(table)}/query", params)

    def fetch_one(self, table: str, record_id: Any, params: Dict[str, Any]) -> Dict[str, Any]:
        """Read the record ``record_id`` of ``table``."""
        return self._request("POST", f"{self._records_path(table)}/{record_id}/query", params)

    def insert_many(self, table: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """Create ``params["records"]`` in ``table``."""
        return self._request("POST", self._records_path(table), params)

    def update_many(self, table: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """Update ``params["records"]`` (each carrying its ``Id``) in ``table``."""
        return self._request("PUT", self._records_path(table), params)

    def delete_many(self, table: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """Delete ``params["RecordIds"]`` from ``table``."""
        return self._request("DELETE", self._records_path(table), params)
