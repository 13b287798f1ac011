#!/usr/bin/env python
"""
Run the live visibility pipeline against OpenSky for a few polling ticks.

Usage (from repo root):
    python scripts/run_pipeline_live.py
"""

import asyncio

from flightspotter.config import settings
from flightspotter.domain.geo import compass_point
from flightspotter.ingestors import OpenSkyIngestor
from flightspotter.models import FlightSnapshot, Location, ViewConfig
from flightspotter.services import PollingController, RouteCache


# London Heathrow approach path, looking east
CONFIG = ViewConfig(
    location=Location(latitude=51.4700, longitude=-0.4543),
    left_bearing=45,
    right_bearing=135,
    max_distance=25,
)
TICKS = 3


async def main() -> None:
    snapshots: asyncio.Queue[FlightSnapshot] = asyncio.Queue()
    auth = await asyncio.to_thread(settings.opensky_auth)
    controller = PollingController(
        feed=OpenSkyIngestor(auth=auth), consumer=snapshots.put_nowait
    )
    routes = RouteCache()

    print(
        f"=== Watching {compass_point(CONFIG.left_bearing)} to "
        f"{compass_point(CONFIG.right_bearing)} within {CONFIG.max_distance}km "
        f"of {CONFIG.location.latitude}, {CONFIG.location.longitude} ===\n"
    )
    controller.start(CONFIG)
    try:
        for tick in range(1, TICKS + 1):
            snapshot = await snapshots.get()
            print(f"Tick {tick}: {len(snapshot.aircraft)} visible, error={snapshot.error!r}")
            for idx, ac in enumerate(snapshot.aircraft[:5], start=1):
                route = await routes.lookup_route(ac.callsign)
                print(
                    f"  {idx}. {ac.callsign or ac.icao24.upper():<8} "
                    f"{ac.distance:6.1f}km @ {ac.bearing:5.1f} deg "
                    f"alt_m={ac.geo_altitude or ac.baro_altitude} "
                    f"route={route.origin or '?'}->{route.destination or '?'}"
                )
    finally:
        await controller.stop()


if __name__ == "__main__":
    asyncio.run(main())
