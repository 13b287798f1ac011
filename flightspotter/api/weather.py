"""Weather at the observer location."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request, status

from flightspotter.models import WeatherSnapshot

router = APIRouter(prefix="/api/v1", tags=["weather"])

logger = logging.getLogger("flightspotter.api.weather")


@router.get("/weather", response_model=WeatherSnapshot, summary="Observer weather")
async def get_weather(request: Request) -> WeatherSnapshot:
    config = request.app.state.controller.config
    if config is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail="No observer view configured"
        )

    try:
        return await request.app.state.weather_ingestor.get_weather(config.location)
    except RuntimeError as exc:
        logger.error("Weather unavailable: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Weather service unavailable",
        ) from exc
