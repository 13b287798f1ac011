"""Filter raw aircraft states down to what the observer can see."""

from __future__ import annotations

from typing import Iterable

from flightspotter.domain.geo import bearing, distance, in_cone
from flightspotter.models.air_traffic import AircraftState, Location, ViewConfig, VisibleAircraft


def filter_visible(
    states: Iterable[AircraftState], config: ViewConfig
) -> list[VisibleAircraft]:
    """Aircraft within range and inside the view cone, nearest first.

    Ties keep feed order (``sorted`` is stable).
    """

    visible: list[VisibleAircraft] = []
    for state in states:
        if not state.has_position:
            continue

        position = Location(latitude=state.latitude, longitude=state.longitude)
        range_km = distance(config.location, position)
        if range_km > config.max_distance:
            continue

        bearing_deg = bearing(config.location, position)
        if not in_cone(bearing_deg, config.left_bearing, config.right_bearing):
            continue

        visible.append(
            VisibleAircraft(
                **state.model_dump(), distance=range_km, bearing=bearing_deg
            )
        )

    return sorted(visible, key=lambda aircraft: aircraft.distance)


__all__ = ["filter_visible"]
