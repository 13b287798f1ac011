from datetime import datetime, timezone

import httpx
import pytest

from flightspotter.ingestors.weather import WeatherIngestor, describe_weather_code
from flightspotter.models import Location


@pytest.mark.anyio
async def test_weather_ingestor_parses_current_weather():
    payload = {
        "latitude": 10.0,
        "longitude": 20.0,
        "current": {
            "time": "2024-01-01T00:00",
            "temperature_2m": 12.5,
            "relative_humidity_2m": 81,
            "wind_speed_10m": 4.2,
            "weather_code": 63,
        },
    }

    def handler(request: httpx.Request):
        assert request.url.params["latitude"] == "10.0"
        assert "weather_code" in request.url.params["current"]
        return httpx.Response(200, json=payload)

    ingestor = WeatherIngestor(
        base_url="http://test-weather", transport=httpx.MockTransport(handler)
    )
    snapshot = await ingestor.get_weather(Location(latitude=10.0, longitude=20.0))

    assert snapshot.temperature_c == 12.5
    assert snapshot.relative_humidity_pct == 81
    assert snapshot.wind_speed_kmh == 4.2
    assert snapshot.weather_code == 63
    assert snapshot.condition == "Rain"
    assert snapshot.as_of == datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc)


@pytest.mark.anyio
async def test_weather_ingestor_handles_http_error():
    transport = httpx.MockTransport(lambda request: httpx.Response(500, text="boom"))
    ingestor = WeatherIngestor(base_url="http://test-weather", transport=transport)

    with pytest.raises(RuntimeError):
        await ingestor.get_weather(Location(latitude=1.0, longitude=2.0))


@pytest.mark.anyio
async def test_weather_ingestor_handles_timeout():
    def handler(request: httpx.Request):
        raise httpx.ReadTimeout("timeout", request=request)

    ingestor = WeatherIngestor(
        base_url="http://test-weather", transport=httpx.MockTransport(handler)
    )

    with pytest.raises(RuntimeError):
        await ingestor.get_weather(Location(latitude=1.0, longitude=2.0))


@pytest.mark.anyio
async def test_weather_ingestor_requires_current_block():
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"hourly": {}}))
    ingestor = WeatherIngestor(base_url="http://test-weather", transport=transport)

    with pytest.raises(RuntimeError):
        await ingestor.get_weather(Location(latitude=1.0, longitude=2.0))


@pytest.mark.parametrize(
    "code,label",
    [(0, "Clear"), (2, "Partly Cloudy"), (45, "Foggy"), (55, "Drizzle"), (71, "Snow"),
     (81, "Showers"), (95, "Thunderstorm"), (120, "Unknown"), (None, "Unknown")],
)
def test_describe_weather_code(code, label):
    assert describe_weather_code(code) == label
