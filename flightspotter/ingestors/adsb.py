"""ADS-B feed client for aircraft state vectors using the OpenSky REST API."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from flightspotter.config import settings
from flightspotter.models.air_traffic import AircraftState, Location

logger = logging.getLogger("flightspotter.ingestors.adsb")

KM_PER_DEGREE = 111.0

# Positional layout of an OpenSky state vector. Index 12 ("sensors") is
# only populated for authenticated sensor owners and is not decoded.
STATE_VECTOR_FIELDS = (
    "icao24",  # 0
    "callsign",  # 1
    "origin_country",  # 2
    "time_position",  # 3
    "last_contact",  # 4
    "longitude",  # 5
    "latitude",  # 6
    "baro_altitude",  # 7
    "on_ground",  # 8
    "velocity",  # 9
    "true_track",  # 10
    "vertical_rate",  # 11
    "sensors",  # 12
    "geo_altitude",  # 13
    "squawk",  # 14
    "spi",  # 15
    "position_source",  # 16
)
MIN_STATE_VECTOR_LENGTH = len(STATE_VECTOR_FIELDS)


@dataclass
class FeedResult:
    """Outcome of one feed query.

    ``error`` is set for transport, HTTP and payload failures. A rate-limited
    query is not an error: it yields no states and ``rate_limited=True``.
    """

    states: list[AircraftState] = field(default_factory=list)
    error: str | None = None
    rate_limited: bool = False


def bounding_box(center: Location, radius_km: float) -> dict[str, float]:
    """Query parameters for a box of ``radius_km`` around ``center``."""

    lat_delta = radius_km / KM_PER_DEGREE
    lon_delta = radius_km / max(
        KM_PER_DEGREE * math.cos(math.radians(center.latitude)), 0.0001
    )
    return {
        "lamin": center.latitude - lat_delta,
        "lomin": center.longitude - lon_delta,
        "lamax": center.latitude + lat_delta,
        "lomax": center.longitude + lon_delta,
    }


def decode_state_vector(entry: Any) -> Optional[AircraftState]:
    """Decode one positional state vector, or return None if it is unusable."""

    if not isinstance(entry, (list, tuple)) or len(entry) < MIN_STATE_VECTOR_LENGTH:
        return None

    record = dict(zip(STATE_VECTOR_FIELDS, entry))
    record.pop("sensors")

    icao24 = record["icao24"]
    if not isinstance(icao24, str) or not icao24.strip():
        return None
    record["icao24"] = icao24.strip().lower()

    callsign = record["callsign"]
    record["callsign"] = (callsign.strip() or None) if isinstance(callsign, str) else None
    record["origin_country"] = record["origin_country"] or ""
    record["on_ground"] = bool(record["on_ground"])
    record["spi"] = bool(record["spi"])
    if record["position_source"] is None:
        record["position_source"] = 0

    try:
        return AircraftState.model_validate(record)
    except ValidationError as exc:
        logger.debug("Skipping malformed state vector for %s: %s", record["icao24"], exc)
        return None


class OpenSkyIngestor:
    """Fetch aircraft state vectors inside a bounding box."""

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        auth: tuple[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url or settings.opensky_states_url
        self.timeout = timeout or settings.opensky_timeout
        self.auth = auth
        self.transport = transport

    async def fetch_states_in_area(
        self, center: Location, radius_km: float
    ) -> list[AircraftState]:
        """Positioned aircraft within ``radius_km`` of ``center``; never raises."""

        result = await self.fetch(center, radius_km)
        return result.states

    async def fetch(self, center: Location, radius_km: float) -> FeedResult:
        params = bounding_box(center, radius_km)

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport, auth=self.auth
            ) as client:
                response = await client.get(self.base_url, params=params)
        except httpx.TimeoutException as exc:
            logger.warning("OpenSky request timed out: %s", exc)
            return FeedResult(error="Aircraft feed request timed out")
        except httpx.RequestError as exc:
            logger.warning("OpenSky request failed: %s", exc)
            return FeedResult(error="Aircraft feed request failed")

        if response.status_code == 429:
            logger.warning("OpenSky rate limit encountered: %s", response.text)
            return FeedResult(rate_limited=True)
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "OpenSky returned HTTP %s: %s", exc.response.status_code, exc
            )
            return FeedResult(
                error=f"Aircraft feed returned HTTP {exc.response.status_code}"
            )

        try:
            payload = response.json()
        except ValueError as exc:
            logger.warning("Failed to parse OpenSky JSON response: %s", exc)
            return FeedResult(error="Aircraft feed returned malformed data")

        if not isinstance(payload, dict):
            logger.warning("Unexpected OpenSky payload type: %s", type(payload).__name__)
            return FeedResult(error="Aircraft feed returned malformed data")

        raw_states = payload.get("states") or []
        if not isinstance(raw_states, list):
            logger.warning("Unexpected OpenSky states type: %s", type(raw_states).__name__)
            return FeedResult(error="Aircraft feed returned malformed data")

        states: list[AircraftState] = []
        for entry in raw_states:
            state = decode_state_vector(entry)
            if state is not None and state.has_position:
                states.append(state)

        logger.debug("Fetched %s positioned aircraft of %s", len(states), len(raw_states))
        return FeedResult(states=states)


__all__ = [
    "FeedResult",
    "MIN_STATE_VECTOR_LENGTH",
    "OpenSkyIngestor",
    "STATE_VECTOR_FIELDS",
    "bounding_box",
    "decode_state_vector",
]
