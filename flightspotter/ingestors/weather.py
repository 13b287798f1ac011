"""Current weather at the observer location using Open-Meteo."""

from __future__ import annotations

from datetime import datetime, timezone
import logging

import httpx

from flightspotter.config import settings
from flightspotter.models.air_traffic import Location
from flightspotter.models.weather import WeatherSnapshot

logger = logging.getLogger("flightspotter.ingestors.weather")

# Upper bounds of WMO weather-code ranges and their labels.
_CONDITIONS = (
    (0, "Clear"),
    (3, "Partly Cloudy"),
    (49, "Foggy"),
    (59, "Drizzle"),
    (69, "Rain"),
    (79, "Snow"),
    (84, "Showers"),
    (99, "Thunderstorm"),
)


def describe_weather_code(code: int | None) -> str:
    if code is None:
        return "Unknown"
    for upper, label in _CONDITIONS:
        if code <= upper:
            return label
    return "Unknown"


def _parse_timestamp(ts: str | None) -> datetime:
    if ts is None:
        return datetime.now(tz=timezone.utc)
    if ts.endswith("Z"):
        ts = ts.replace("Z", "+00:00")
    parsed = datetime.fromisoformat(ts)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class WeatherIngestor:
    """Fetch current conditions from Open-Meteo."""

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or settings.weather_base_url
        self.timeout = timeout or settings.weather_timeout
        self.transport = transport

    async def get_weather(self, location: Location) -> WeatherSnapshot:
        params = {
            "latitude": location.latitude,
            "longitude": location.longitude,
            "current": "temperature_2m,relative_humidity_2m,wind_speed_10m,weather_code",
            "timezone": "UTC",
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.get(self.base_url, params=params)
                response.raise_for_status()
        except httpx.TimeoutException as exc:
            logger.error("Weather request timed out: %s", exc)
            raise RuntimeError("Weather service timeout") from exc
        except httpx.HTTPStatusError as exc:
            logger.error(
                "Weather service returned error: status=%s body=%s",
                exc.response.status_code,
                exc.response.text,
            )
            raise RuntimeError("Weather service error") from exc
        except httpx.RequestError as exc:
            logger.error("Weather request failed: %s", exc)
            raise RuntimeError("Weather request failed") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            logger.error("Failed to parse weather JSON response: %s", exc)
            raise RuntimeError("Weather payload malformed") from exc

        current = payload.get("current") if isinstance(payload, dict) else None
        if not current:
            raise RuntimeError("Weather payload has no current conditions")

        code = current.get("weather_code")
        snapshot = WeatherSnapshot(
            latitude=location.latitude,
            longitude=location.longitude,
            as_of=_parse_timestamp(current.get("time")),
            temperature_c=current.get("temperature_2m"),
            relative_humidity_pct=current.get("relative_humidity_2m"),
            wind_speed_kmh=current.get("wind_speed_10m"),
            weather_code=code,
            condition=describe_weather_code(code),
        )
        logger.debug("Weather snapshot ingested: %s", snapshot)
        return snapshot


__all__ = ["WeatherIngestor", "describe_weather_code"]
