"""
Read-only service for the ``weather_c`` table.

Weather rows have no lifecycle of their own; the dashboard only needs
the latest few.  Unlike every other service, a failed remote call is
not reported to the caller: the accessors log it and return a small
canned forecast so the dashboard widget can still render.
"""

from __future__ import annotations

import logging
from typing import List

from farm_manager_api.app.schemas.weather import WeatherRead
from farm_manager_api.app.services.base_service import FieldMapping, TableService

logger = logging.getLogger(__name__)

CURRENT_LIMIT = 5
EXTENDED_LIMIT = 10

FALLBACK_TODAY = {
    "date": "Today",
    "temperature": 78,
    "condition": "Partly Cloudy",
    "precipitation": 20,
    "wind": 8,
    "humidity": 65,
    "uv": 6,
}
FALLBACK_TOMORROW = {
    "date": "Tomorrow",
    "temperature": 82,
    "condition": "Sunny",
    "precipitation": 5,
    "wind": 6,
    "humidity": 58,
    "uv": 8,
}


class WeatherService(TableService[WeatherRead]):
    """Latest forecast entries, most recent first."""

    table_name = "weather_c"
    label = "weather"
    read_model = WeatherRead
    has_identity = False
    fields = (
        FieldMapping("date", "date_c", default="Today"),
        FieldMapping("temperature", "temperature_c", default=75),
        FieldMapping("condition", "condition_c", default="Sunny"),
        FieldMapping("precipitation", "precipitation_c", default=0),
        FieldMapping("wind", "wind_c", default=5),
        FieldMapping("humidity", "humidity_c", default=60),
        FieldMapping("uv", "uv_c", default=5),
    )

    async def get_current_weather(self) -> List[WeatherRead]:
        """Return the 5 most recent entries, or a one-day fallback on failure."""
        try:
            return await self._fetch(self.fetch_params(limit=CURRENT_LIMIT))
        except Exception as exc:
            logger.warning("Error fetching current weather, using fallback data: %s", exc)
            return [WeatherRead(**FALLBACK_TODAY)]

    async def get_extended_forecast(self) -> List[WeatherRead]:
        """Return the 10 most recent entries, or a two-day fallback on failure."""
        try:
            return await self._fetch(self.fetch_params(limit=EXTENDED_LIMIT))
        except Exception as exc:
            logger.warning("Error fetching extended forecast, using fallback data: %s", exc)
            return [WeatherRead(**FALLBACK_TODAY), WeatherRead(**FALLBACK_TOMORROW)]
