"""Service-layer pipeline for Flight Spotter."""

from .details import AircraftDetailsBuilder
from .poller import ControllerState, PollingController, SnapshotConsumer
from .route_cache import RouteCache, RouteLookup
from .visibility import filter_visible

__all__ = [
    "AircraftDetailsBuilder",
    "ControllerState",
    "PollingController",
    "RouteCache",
    "RouteLookup",
    "SnapshotConsumer",
    "filter_visible",
]
