"""
Application package initializer.

The package is organised into three layers: ``core`` (configuration,
logging, errors and the remote store contract), ``schemas`` (UI-facing
pydantic models) and ``services`` (one service per remote table).
Callers normally only need the container::

    from farm_manager_api.app import get_services

    services = get_services()
    farms = await services.farms.get_all()
"""

from .container import FarmServices, build_services, get_services  # noqa: F401
