import asyncio

from conftest import RecordingClient
from farm_manager_api.app.core.memory_store import InMemoryDataClient
from farm_manager_api.app.services import WeatherService

TODAY = {"date": "Today", "temperature": 78, "condition": "Partly Cloudy",
         "precipitation": 20, "wind": 8, "humidity": 65, "uv": 6}
TOMORROW = {"date": "Tomorrow", "temperature": 82, "condition": "Sunny",
            "precipitation": 5, "wind": 6, "humidity": 58, "uv": 8}


def test_current_weather_requests_five_most_recent(recorder):
    asyncio.run(WeatherService(recorder).get_current_weather())

    params = recorder.last_params
    assert params["pagingInfo"] == {"limit": 5, "offset": 0}
    assert params["orderBy"] == [{"fieldName": "CreatedOn", "sorttype": "DESC"}]


def test_extended_forecast_requests_ten_most_recent(recorder):
    asyncio.run(WeatherService(recorder).get_extended_forecast())

    assert recorder.last_params["pagingInfo"] == {"limit": 10, "offset": 0}


def test_current_weather_falls_back_on_failure_envelope():
    service = WeatherService(InMemoryDataClient(fail_tables={"weather_c"}))

    forecast = asyncio.run(service.get_current_weather())

    assert [w.model_dump() for w in forecast] == [TODAY]


def test_extended_forecast_falls_back_when_client_raises():
    service = WeatherService(RecordingClient(ConnectionError("network down")))

    forecast = asyncio.run(service.get_extended_forecast())

    assert len(forecast) == 2
    assert forecast[1].model_dump() == TOMORROW


def test_records_are_mapped_with_defaults_and_keep_zero_values():
    store = InMemoryDataClient()
    store.add_row("weather_c", {"date_c": "Mon", "temperature_c": 71, "humidity_c": 0, "CreatedOn": "2024-01-01"})
    store.add_row("weather_c", {"date_c": "Tue", "CreatedOn": "2024-01-02"})

    forecast = asyncio.run(WeatherService(store).get_current_weather())

    assert [w.date for w in forecast] == ["Tue", "Mon"]
    tuesday, monday = forecast
    assert tuesday.temperature == 75
    assert tuesday.condition == "Sunny"
    assert tuesday.humidity == 60
    assert monday.humidity == 0
    assert monday.temperature == 71


def test_current_weather_is_limited_to_five():
    store = InMemoryDataClient()
    for day in range(8):
        store.add_row("weather_c", {"date_c": f"Day {day}", "CreatedOn": f"2024-01-0{day + 1}"})

    current = asyncio.run(WeatherService(store).get_current_weather())
    extended = asyncio.run(WeatherService(store).get_extended_forecast())

    assert [w.date for w in current] == ["Day 7", "Day 6", "Day 5", "Day 4", "Day 3"]
    assert len(extended) == 8
