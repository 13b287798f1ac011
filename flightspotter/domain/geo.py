"""Spherical-earth geometry relative to an observer."""

from __future__ import annotations

import math

from flightspotter.models.air_traffic import Location, ViewConfig

EARTH_RADIUS_KM = 6371.0

_COMPASS_POINTS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)


def normalize_bearing(degrees: float) -> float:
    """Wrap an angle into [0, 360)."""

    result = ((degrees % 360.0) + 360.0) % 360.0
    # float modulo of a tiny negative can round up to exactly 360
    return 0.0 if result >= 360.0 else result


def distance(a: Location, b: Location) -> float:
    """Great-circle distance in kilometers (haversine)."""

    d_lat = math.radians(b.latitude - a.latitude)
    d_lon = math.radians(b.longitude - a.longitude)
    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(a.latitude))
        * math.cos(math.radians(b.latitude))
        * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_KM * c


def bearing(a: Location, b: Location) -> float:
    """Initial great-circle bearing from ``a`` to ``b`` in [0, 360)."""

    d_lon = math.radians(b.longitude - a.longitude)
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)

    y = math.sin(d_lon) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(
        d_lon
    )
    return normalize_bearing(math.degrees(math.atan2(y, x)) + 360.0)


def destination_point(origin: Location, bearing_deg: float, distance_km: float) -> Location:
    """Point reached travelling ``distance_km`` from ``origin`` on ``bearing_deg``."""

    angular = distance_km / EARTH_RADIUS_KM
    theta = math.radians(bearing_deg)
    lat1 = math.radians(origin.latitude)
    lon1 = math.radians(origin.longitude)

    lat2 = math.asin(
        math.sin(lat1) * math.cos(angular)
        + math.cos(lat1) * math.sin(angular) * math.cos(theta)
    )
    lon2 = lon1 + math.atan2(
        math.sin(theta) * math.sin(angular) * math.cos(lat1),
        math.cos(angular) - math.sin(lat1) * math.sin(lat2),
    )

    longitude = (math.degrees(lon2) + 540.0) % 360.0 - 180.0
    return Location(latitude=math.degrees(lat2), longitude=longitude)


def in_cone(bearing_deg: float, left: float, right: float) -> bool:
    """Return True when ``bearing_deg`` lies on the clockwise arc left..right.

    Both edges are inclusive. When ``left > right`` the arc wraps through
    north, so membership is ``bearing >= left or bearing <= right``.
    """

    bearing_deg = normalize_bearing(bearing_deg)
    left = normalize_bearing(left)
    right = normalize_bearing(right)

    if left > right:
        return bearing_deg >= left or bearing_deg <= right
    return left <= bearing_deg <= right


def view_cone_polygon(config: ViewConfig, step: float = 5.0) -> list[Location]:
    """Outline of the view cone: observer, arc at max range, observer again."""

    start = config.left_bearing
    end = config.right_bearing
    if start > end:
        end += 360.0

    points = [config.location]
    current = start
    while current <= end:
        points.append(
            destination_point(config.location, current % 360.0, config.max_distance)
        )
        current += step
    points.append(
        destination_point(config.location, config.right_bearing, config.max_distance)
    )
    points.append(config.location)
    return points


def compass_point(bearing_deg: float) -> str:
    """16-wind compass label for a bearing, e.g. 350 -> 'N'."""

    index = int(normalize_bearing(bearing_deg) / 22.5 + 0.5) % 16
    return _COMPASS_POINTS[index]


__all__ = [
    "EARTH_RADIUS_KM",
    "bearing",
    "compass_point",
    "destination_point",
    "distance",
    "in_cone",
    "normalize_bearing",
    "view_cone_polygon",
]
