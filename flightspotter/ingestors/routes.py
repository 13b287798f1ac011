"""Route lookups (origin and destination) by callsign."""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx

from flightspotter.config import settings
from flightspotter.models.air_traffic import RouteInfo

logger = logging.getLogger("flightspotter.ingestors.routes")


def _route_from_payload(payload: object) -> RouteInfo:
    if not isinstance(payload, dict):
        raise ValueError("Route payload is not an object")

    route = payload.get("route")
    if not route:
        return RouteInfo()
    if not isinstance(route, list):
        raise ValueError("Route field is not a list")

    return RouteInfo(
        origin=route[0],
        destination=route[-1] if len(route) > 1 else None,
    )


class RouteIngestor:
    """Fetch the flight route for a callsign."""

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or settings.route_base_url).rstrip("/")
        self.timeout = timeout or settings.route_timeout
        self.transport = transport

    async def get_route(self, callsign: str) -> RouteInfo:
        url = f"{self.base_url}/{quote(callsign.strip(), safe='')}"

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.TimeoutException as exc:
            logger.info("Route request timed out for %s: %s", callsign, exc)
            raise RuntimeError("Route service timeout") from exc
        except httpx.HTTPStatusError as exc:
            logger.info(
                "Route service returned status=%s for %s",
                exc.response.status_code,
                callsign,
            )
            raise RuntimeError("Route service error") from exc
        except httpx.RequestError as exc:
            logger.info("Route request failed for %s: %s", callsign, exc)
            raise RuntimeError("Route request failed") from exc

        try:
            return _route_from_payload(response.json())
        except ValueError as exc:
            # pydantic.ValidationError is a ValueError too
            logger.info("Malformed route payload for %s: %s", callsign, exc)
            raise RuntimeError("Route payload malformed") from exc


__all__ = ["RouteIngestor"]
