"""Recurring fetch, filter and publish cycle for one observer."""

from __future__ import annotations

import asyncio
from enum import Enum
import logging
from typing import Callable, Optional, Protocol

from flightspotter.config import settings
from flightspotter.ingestors.adsb import FeedResult, OpenSkyIngestor
from flightspotter.models.air_traffic import FlightSnapshot, Location, ViewConfig
from flightspotter.services.visibility import filter_visible

logger = logging.getLogger("flightspotter.poller")

SnapshotConsumer = Callable[[FlightSnapshot], None]


class StateFeed(Protocol):
    async def fetch(self, center: Location, radius_km: float) -> FeedResult:
        ...


class ControllerState(str, Enum):
    """Lifecycle states of a polling controller."""

    IDLE = "idle"
    POLLING = "polling"
    TERMINATED = "terminated"


class PollingController:
    """Drive the feed on a fixed interval and publish visible-aircraft snapshots.

    Every ``start`` or ``stop`` bumps an epoch counter. A cycle captures the
    epoch it was started under and compares it with the current one right
    before publishing, so a superseded or stopped cycle can never publish,
    even if its in-flight fetch ignores cancellation. At most one cycle task
    is live per controller.
    """

    def __init__(
        self,
        *,
        feed: Optional[StateFeed] = None,
        consumer: Optional[SnapshotConsumer] = None,
        interval: float | None = None,
    ) -> None:
        self.feed = feed or OpenSkyIngestor(auth=settings.opensky_auth())
        self.consumer = consumer
        self.interval = settings.poll_interval_seconds if interval is None else interval
        if self.interval <= 0:
            raise ValueError("Poll interval must be positive")

        self._state = ControllerState.IDLE
        self._config: ViewConfig | None = None
        self._epoch = 0
        self._task: asyncio.Task[None] | None = None
        self._retired: set[asyncio.Task[None]] = set()
        self._snapshot = FlightSnapshot()

    @property
    def state(self) -> ControllerState:
        return self._state

    @property
    def config(self) -> ViewConfig | None:
        return self._config

    @property
    def epoch(self) -> int:
        return self._epoch

    @property
    def snapshot(self) -> FlightSnapshot:
        """The most recent snapshot, with ``loading`` set until the first fetch."""
        return self._snapshot

    def start(self, config: ViewConfig | None) -> None:
        """Begin polling for ``config``, superseding any active cycle.

        ``None`` returns the controller to idle and publishes an empty
        snapshot. Must be called from within a running event loop.
        """

        if self._state is ControllerState.TERMINATED:
            raise RuntimeError("Polling controller has been stopped")
        if (
            config is not None
            and self._state is ControllerState.POLLING
            and config == self._config
        ):
            return

        self._cancel_cycle()

        if config is None:
            self._state = ControllerState.IDLE
            self._config = None
            logger.info("Polling idle (epoch %s)", self._epoch)
            self._emit(FlightSnapshot(epoch=self._epoch))
            return

        self._state = ControllerState.POLLING
        self._config = config
        self._snapshot = FlightSnapshot(loading=True, epoch=self._epoch)
        self._task = asyncio.get_running_loop().create_task(
            self._run(config, self._epoch)
        )
        logger.info(
            "Polling started (epoch %s) at %.4f,%.4f cone %s-%s range %skm",
            self._epoch,
            config.location.latitude,
            config.location.longitude,
            config.left_bearing,
            config.right_bearing,
            config.max_distance,
        )

    async def stop(self) -> None:
        """Stop polling for good; nothing is published afterwards."""

        self._cancel_cycle()
        self._state = ControllerState.TERMINATED
        self._config = None
        # superseded cycles as well as the current one
        pending = list(self._retired)
        results = await asyncio.gather(*pending, return_exceptions=True)
        for result in results:
            if isinstance(result, Exception):
                logger.warning("Polling cycle ended with error: %s", result)
        logger.info("Polling stopped (epoch %s)", self._epoch)

    def _cancel_cycle(self) -> None:
        self._epoch += 1
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()
            # keep a reference until the cancelled task finishes unwinding
            self._retired.add(task)
            task.add_done_callback(self._retired.discard)

    async def _run(self, config: ViewConfig, epoch: int) -> None:
        loop = asyncio.get_running_loop()
        while True:
            started = loop.time()
            snapshot = await self._poll_once(config, epoch)

            if epoch != self._epoch:
                logger.debug("Discarding snapshot from superseded epoch %s", epoch)
                return
            self._emit(snapshot)

            await asyncio.sleep(max(self.interval - (loop.time() - started), 0.0))

    async def _poll_once(self, config: ViewConfig, epoch: int) -> FlightSnapshot:
        try:
            result = await self.feed.fetch(config.location, config.max_distance)
            aircraft = filter_visible(result.states, config)
            error = result.error
        except Exception as exc:
            logger.warning("Polling cycle failed: %s", exc)
            aircraft = []
            error = "Failed to fetch aircraft data"

        return FlightSnapshot(
            aircraft=tuple(aircraft), loading=False, error=error, epoch=epoch
        )

    def _emit(self, snapshot: FlightSnapshot) -> None:
        self._snapshot = snapshot
        if self.consumer is None:
            return
        try:
            self.consumer(snapshot)
        except Exception:
            logger.exception("Snapshot consumer raised")


__all__ = ["ControllerState", "PollingController", "SnapshotConsumer", "StateFeed"]
