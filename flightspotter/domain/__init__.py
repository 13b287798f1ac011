"""Pure domain helpers: geometry and airline lookups."""

from .airlines import airline_from_callsign
from .geo import (
    bearing,
    compass_point,
    destination_point,
    distance,
    in_cone,
    normalize_bearing,
    view_cone_polygon,
)

__all__ = [
    "airline_from_callsign",
    "bearing",
    "compass_point",
    "destination_point",
    "distance",
    "in_cone",
    "normalize_bearing",
    "view_cone_polygon",
]
