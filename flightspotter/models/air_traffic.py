"""Models for observer configuration and air traffic snapshots."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Location(BaseModel):
    """A point on the WGS84 ellipsoid in decimal degrees."""

    latitude: float = Field(..., ge=-90, le=90, description="Latitude in decimal degrees")
    longitude: float = Field(
        ..., ge=-180, le=180, description="Longitude in decimal degrees"
    )

    model_config = ConfigDict(frozen=True)


class ViewConfig(BaseModel):
    """Observer location, viewing wedge and maximum range.

    The wedge runs clockwise from ``left_bearing`` to ``right_bearing`` and
    may wrap through north (e.g. 315 to 45).
    """

    location: Location = Field(..., description="Observer location")
    left_bearing: float = Field(
        ..., ge=0, le=360, description="Left edge of the view cone in degrees"
    )
    right_bearing: float = Field(
        ..., ge=0, le=360, description="Right edge of the view cone in degrees"
    )
    max_distance: float = Field(..., gt=0, description="Maximum range in kilometers")

    model_config = ConfigDict(frozen=True)


class AircraftState(BaseModel):
    """One raw state vector as reported by the aircraft feed."""

    icao24: str = Field(..., description="Lowercase ICAO 24-bit hex address")
    callsign: Optional[str] = Field(default=None, description="Callsign, stripped")
    origin_country: str = Field(default="", description="Country of registration")
    time_position: Optional[int] = Field(
        default=None, description="Unix time of the last position update"
    )
    last_contact: Optional[int] = Field(
        default=None, description="Unix time of the last message received"
    )
    longitude: Optional[float] = Field(
        default=None, ge=-180, le=180, description="WGS84 longitude"
    )
    latitude: Optional[float] = Field(
        default=None, ge=-90, le=90, description="WGS84 latitude"
    )
    baro_altitude: Optional[float] = Field(
        default=None, description="Barometric altitude in meters"
    )
    on_ground: bool = Field(default=False, description="Surface position report")
    velocity: Optional[float] = Field(
        default=None, description="Ground speed in meters per second"
    )
    true_track: Optional[float] = Field(
        default=None, description="Track over ground in degrees from north"
    )
    vertical_rate: Optional[float] = Field(
        default=None, description="Vertical rate in meters per second"
    )
    geo_altitude: Optional[float] = Field(
        default=None, description="Geometric altitude in meters"
    )
    squawk: Optional[str] = Field(default=None, description="Transponder code")
    spi: bool = Field(default=False, description="Special purpose indicator")
    position_source: int = Field(
        default=0, description="0 ADS-B, 1 ASTERIX, 2 MLAT, 3 FLARM"
    )

    model_config = ConfigDict(frozen=True, extra="ignore")

    @property
    def has_position(self) -> bool:
        return self.latitude is not None and self.longitude is not None


class VisibleAircraft(AircraftState):
    """An aircraft inside the view cone, with range and bearing from the observer."""

    distance: float = Field(..., ge=0, description="Distance from observer in km")
    bearing: float = Field(
        ..., ge=0, lt=360, description="Bearing from observer to aircraft in degrees"
    )


class RouteInfo(BaseModel):
    """Origin and destination for a callsign; both ``None`` when unknown."""

    origin: Optional[str] = Field(default=None, description="Origin airport code")
    destination: Optional[str] = Field(
        default=None, description="Destination airport code"
    )

    model_config = ConfigDict(frozen=True)


class FlightSnapshot(BaseModel):
    """One published result of the polling pipeline."""

    aircraft: tuple[VisibleAircraft, ...] = Field(
        default=(), description="Visible aircraft sorted by distance"
    )
    loading: bool = Field(
        default=False, description="True until the first fetch after a start"
    )
    error: Optional[str] = Field(
        default=None, description="Feed failure for this cycle, if any"
    )
    epoch: int = Field(default=0, description="Start generation that produced it")
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=timezone.utc),
        description="Time the snapshot was produced (UTC)",
    )

    model_config = ConfigDict(frozen=True)


class AircraftDetails(BaseModel):
    """A visible aircraft decorated with airline, route and photo."""

    aircraft: VisibleAircraft
    airline: Optional[str] = None
    route: RouteInfo = Field(default_factory=RouteInfo)
    photo_url: Optional[str] = None


__all__ = [
    "AircraftDetails",
    "AircraftState",
    "FlightSnapshot",
    "Location",
    "RouteInfo",
    "ViewConfig",
    "VisibleAircraft",
]
