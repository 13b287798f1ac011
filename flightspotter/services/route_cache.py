"""Memoized route lookups keyed by callsign."""

from __future__ import annotations

import asyncio
import logging
from typing import MutableMapping, Optional, Protocol

from flightspotter.ingestors.routes import RouteIngestor
from flightspotter.models.air_traffic import RouteInfo

logger = logging.getLogger("flightspotter.route_cache")


class RouteLookup(Protocol):
    async def get_route(self, callsign: str) -> RouteInfo:
        ...


def _cache_key(callsign: str | None) -> str:
    return (callsign or "").strip().upper()


class RouteCache:
    """Remember every route answer, including failures, for the process lifetime.

    A failed lookup is stored as an unknown ``RouteInfo`` and never retried.
    Concurrent first lookups for the same callsign share one upstream call.
    The store is any mutable mapping so callers can swap in a bounded one.
    """

    def __init__(
        self,
        lookup: Optional[RouteLookup] = None,
        store: Optional[MutableMapping[str, RouteInfo]] = None,
    ) -> None:
        self.lookup = lookup or RouteIngestor()
        self.store: MutableMapping[str, RouteInfo] = store if store is not None else {}
        self._pending: dict[str, asyncio.Task[RouteInfo]] = {}

    async def lookup_route(self, callsign: str | None) -> RouteInfo:
        key = _cache_key(callsign)
        if not key:
            return RouteInfo()

        cached = self.store.get(key)
        if cached is not None:
            return cached

        task = self._pending.get(key)
        if task is None:
            task = asyncio.ensure_future(self._resolve(key))
            self._pending[key] = task
        # shield so one caller going away does not cancel the shared lookup
        return await asyncio.shield(task)

    async def _resolve(self, key: str) -> RouteInfo:
        try:
            route = await self.lookup.get_route(key)
        except Exception as exc:  # route data is optional; any failure means unknown
            logger.debug("Route lookup for %s failed; caching as unknown: %s", key, exc)
            route = RouteInfo()
        finally:
            self._pending.pop(key, None)

        self.store[key] = route
        return route


__all__ = ["RouteCache", "RouteLookup"]
