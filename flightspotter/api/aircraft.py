"""Visible aircraft and route endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request, status

from flightspotter.models import AircraftDetails, FlightSnapshot, RouteInfo

router = APIRouter(prefix="/api/v1", tags=["aircraft"])


@router.get("/aircraft", response_model=FlightSnapshot, summary="Latest snapshot")
async def get_aircraft(request: Request) -> FlightSnapshot:
    return request.app.state.controller.snapshot


@router.get(
    "/aircraft/{icao24}",
    response_model=AircraftDetails,
    summary="Details for one visible aircraft",
)
async def get_aircraft_details(icao24: str, request: Request) -> AircraftDetails:
    """Airline, route and photo for an aircraft in the latest snapshot."""

    wanted = icao24.strip().lower()
    snapshot: FlightSnapshot = request.app.state.controller.snapshot
    for aircraft in snapshot.aircraft:
        if aircraft.icao24 == wanted:
            return await request.app.state.details_builder.describe(aircraft)

    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Aircraft {wanted} is not currently visible",
    )


@router.get(
    "/routes/{callsign}", response_model=RouteInfo, summary="Route for a callsign"
)
async def get_route(callsign: str, request: Request) -> RouteInfo:
    return await request.app.state.route_cache.lookup_route(callsign)
