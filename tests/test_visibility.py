import pytest

from flightspotter.domain.geo import destination_point
from flightspotter.models import AircraftState, Location, ViewConfig
from flightspotter.services.visibility import filter_visible

OBSERVER = Location(latitude=0.0, longitude=0.0)
CONFIG = ViewConfig(location=OBSERVER, left_bearing=315, right_bearing=45, max_distance=10)


def _aircraft_at(icao24: str, bearing_deg: float, distance_km: float, **extra) -> AircraftState:
    point = destination_point(OBSERVER, bearing_deg, distance_km)
    return AircraftState(
        icao24=icao24, latitude=point.latitude, longitude=point.longitude, **extra
    )


def test_filter_keeps_only_aircraft_in_range_and_cone():
    states = [
        _aircraft_at("a00001", 0, 5),
        _aircraft_at("a00002", 90, 5),  # outside cone
        _aircraft_at("a00003", 10, 20),  # outside range
    ]

    visible = filter_visible(states, CONFIG)

    assert [ac.icao24 for ac in visible] == ["a00001"]
    assert visible[0].distance == pytest.approx(5, rel=1e-3)
    assert visible[0].bearing == pytest.approx(0, abs=1e-6)


def test_filter_sorts_by_distance_across_north():
    states = [
        _aircraft_at("far", 340, 9),
        _aircraft_at("near", 20, 2),
        _aircraft_at("mid", 0, 6),
    ]

    visible = filter_visible(states, CONFIG)

    assert [ac.icao24 for ac in visible] == ["near", "mid", "far"]
    assert [ac.distance for ac in visible] == sorted(ac.distance for ac in visible)


def test_filter_keeps_feed_order_for_equal_distances():
    twin_a = _aircraft_at("twin-a", 0, 4)
    twin_b = twin_a.model_copy(update={"icao24": "twin-b"})
    twin_c = twin_a.model_copy(update={"icao24": "twin-c"})

    visible = filter_visible([twin_b, twin_a, twin_c], CONFIG)

    assert [ac.icao24 for ac in visible] == ["twin-b", "twin-a", "twin-c"]


def test_filter_skips_aircraft_without_position():
    states = [
        AircraftState(icao24="nopos1"),
        AircraftState(icao24="nopos2", latitude=0.01),
        _aircraft_at("a00001", 0, 1),
    ]

    visible = filter_visible(states, CONFIG)

    assert [ac.icao24 for ac in visible] == ["a00001"]


def test_filter_preserves_state_fields():
    state = _aircraft_at(
        "abc123", 30, 3, callsign="BAW123", baro_altitude=1200.0, velocity=80.0
    )

    [visible] = filter_visible([state], CONFIG)

    assert visible.callsign == "BAW123"
    assert visible.baro_altitude == 1200.0
    assert visible.velocity == 80.0
    assert visible.bearing == pytest.approx(30, abs=1e-6)


def test_filter_empty_input():
    assert filter_visible([], CONFIG) == []


def test_filter_non_wrapping_cone():
    config = ViewConfig(location=OBSERVER, left_bearing=90, right_bearing=180, max_distance=50)
    states = [
        _aircraft_at("east", 90.5, 10),
        _aircraft_at("south", 179.5, 20),
        _aircraft_at("north", 0, 5),
        _aircraft_at("west", 270, 5),
    ]

    visible = filter_visible(states, config)

    assert [ac.icao24 for ac in visible] == ["east", "south"]
