"""Pydantic models for the Flight Spotter service."""

from .air_traffic import (
    AircraftDetails,
    AircraftState,
    FlightSnapshot,
    Location,
    RouteInfo,
    ViewConfig,
    VisibleAircraft,
)
from .view import ViewStatusResponse
from .weather import WeatherSnapshot

__all__ = [
    "AircraftDetails",
    "AircraftState",
    "FlightSnapshot",
    "Location",
    "RouteInfo",
    "ViewConfig",
    "ViewStatusResponse",
    "VisibleAircraft",
    "WeatherSnapshot",
]
