"""
Pydantic schema for weather forecast entries.

Weather rows are read-only and carry no identity; they are consumed
as an ordered list, most recent first.
"""

from .common import UIModel


class WeatherRead(UIModel):
    """A single forecast entry."""

    date: str = "Today"
    temperature: float = 75
    condition: str = "Sunny"
    precipitation: float = 0
    wind: float = 5
    humidity: float = 60
    uv: float = 5
