"""Best-effort aircraft photo lookup from planespotters.net."""

from __future__ import annotations

import logging

import httpx

from flightspotter.config import settings

logger = logging.getLogger("flightspotter.ingestors.photos")


class PhotoIngestor:
    """Find a thumbnail for an airframe by its ICAO hex address."""

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or settings.photo_base_url).rstrip("/")
        self.timeout = timeout or settings.photo_timeout
        self.transport = transport

    async def get_photo_url(self, icao24: str) -> str | None:
        """Return a large thumbnail URL, or None when no photo can be found."""

        url = f"{self.base_url}/{icao24.strip().upper()}"
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.debug("Photo lookup failed for %s: %s", icao24, exc)
            return None

        photos = payload.get("photos") if isinstance(payload, dict) else None
        if not photos:
            return None
        try:
            return photos[0]["thumbnail_large"]["src"]
        except (KeyError, TypeError, IndexError):
            logger.debug("Unexpected photo payload for %s", icao24)
            return None


__all__ = ["PhotoIngestor"]
