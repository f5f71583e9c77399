"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields.  The
remote store credentials (project identifier and public key) are
passed to the remote data client as-is; they are never validated
locally, so a missing or wrong value only shows up as a failed
remote call.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Farm Manager")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Credentials of the backend-as-a-service project that stores every
    # farm, crop, task, transaction, equipment and weather record.
    apper_project_id: str = os.getenv("APPER_PROJECT_ID", "")
    apper_public_key: str = os.getenv("APPER_PUBLIC_KEY", "")

    # Root URL of the remote data API.  Table endpoints are resolved
    # relative to it by ``apper_client.ApperClient``.
    apper_base_url: str = os.getenv("APPER_BASE_URL", "https://api.apper.io")

    # Seconds to wait for a single remote call before giving up.
    request_timeout: float = float(os.getenv("APPER_REQUEST_TIMEOUT", "15"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes defaults at class definition time, environment variables
# should be set before importing this module.
settings = Settings()
