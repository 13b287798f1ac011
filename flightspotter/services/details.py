"""Decorate a visible aircraft with airline, route and photo."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from flightspotter.domain.airlines import airline_from_callsign
from flightspotter.ingestors.photos import PhotoIngestor
from flightspotter.models.air_traffic import AircraftDetails, VisibleAircraft
from flightspotter.services.route_cache import RouteCache

logger = logging.getLogger("flightspotter.details")


class AircraftDetailsBuilder:
    """Gather the per-aircraft card: route and photo are looked up concurrently."""

    def __init__(
        self,
        route_cache: RouteCache,
        photo_ingestor: Optional[PhotoIngestor] = None,
    ) -> None:
        self.route_cache = route_cache
        self.photo_ingestor = photo_ingestor or PhotoIngestor()

    async def describe(self, aircraft: VisibleAircraft) -> AircraftDetails:
        route, photo_url = await asyncio.gather(
            self.route_cache.lookup_route(aircraft.callsign),
            self.photo_ingestor.get_photo_url(aircraft.icao24),
        )
        logger.debug(
            "Details for %s: route=%s photo=%s", aircraft.icao24, route, bool(photo_url)
        )
        return AircraftDetails(
            aircraft=aircraft,
            airline=airline_from_callsign(aircraft.callsign),
            route=route,
            photo_url=photo_url,
        )


__all__ = ["AircraftDetailsBuilder"]
