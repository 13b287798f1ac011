"""Weather data models for the observer location."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class WeatherSnapshot(BaseModel):
    """Current conditions at the observer location."""

    latitude: float = Field(..., description="Latitude of the observation point")
    longitude: float = Field(..., description="Longitude of the observation point")
    as_of: datetime = Field(..., description="Timestamp of the weather data (UTC)")
    temperature_c: Optional[float] = Field(
        default=None, description="Air temperature in Celsius",
    )
    relative_humidity_pct: Optional[float] = Field(
        default=None, description="Relative humidity at 2 m in percent",
    )
    wind_speed_kmh: Optional[float] = Field(
        default=None, description="Wind speed at 10 m in kilometers per hour",
    )
    weather_code: Optional[int] = Field(
        default=None, description="WMO weather interpretation code",
    )
    condition: Optional[str] = Field(
        default=None, description="Short textual summary of conditions",
    )


__all__ = ["WeatherSnapshot"]
