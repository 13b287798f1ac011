from __future__ import annotations

import asyncio
import contextlib
import logging
import time

from fastapi import FastAPI, Request
from pydantic import ValidationError

from flightspotter.api import api_router
from flightspotter.config import settings
from flightspotter.ingestors import OpenSkyIngestor, PhotoIngestor, WeatherIngestor
from flightspotter.models import Location, ViewConfig
from flightspotter.services import AircraftDetailsBuilder, PollingController, RouteCache

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger("flightspotter")


def default_view_config() -> ViewConfig | None:
    """Observer view from the environment, or None when no location is set."""

    if settings.observer_lat is None or settings.observer_lon is None:
        return None
    try:
        return ViewConfig(
            location=Location(
                latitude=settings.observer_lat, longitude=settings.observer_lon
            ),
            left_bearing=settings.observer_left_bearing,
            right_bearing=settings.observer_right_bearing,
            max_distance=settings.observer_max_distance_km,
        )
    except ValidationError as exc:
        logger.warning("Ignoring invalid observer configuration: %s", exc)
        return None


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    """Wire the pipeline on startup and tear polling down on shutdown."""

    route_cache = RouteCache()
    app.state.route_cache = route_cache
    app.state.details_builder = AircraftDetailsBuilder(route_cache, PhotoIngestor())
    app.state.weather_ingestor = WeatherIngestor()
    # SSM lookups block, keep them off the event loop
    auth = await asyncio.to_thread(settings.opensky_auth)
    app.state.controller = PollingController(feed=OpenSkyIngestor(auth=auth))

    config = default_view_config()
    if config is not None:
        app.state.controller.start(config)
    else:
        logger.info("No observer configured; waiting for PUT /api/v1/view")

    try:
        yield
    finally:
        await app.state.controller.stop()


app = FastAPI(title="Flight Spotter", lifespan=lifespan)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log basic request information for observability."""

    start_time = time.time()
    response = await call_next(request)
    duration_ms = (time.time() - start_time) * 1000
    logger.info(
        "HTTP %s %s -> %s (%.2f ms)",
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
    )
    return response


app.include_router(api_router)


@app.get("/", summary="Root")
def read_root() -> dict[str, str]:
    """Basic root endpoint for quick verification."""

    return {"message": "Flight Spotter is running"}
