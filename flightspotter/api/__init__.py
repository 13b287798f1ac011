"""API routers for the Flight Spotter service."""

from fastapi import APIRouter

from .aircraft import router as aircraft_router
from .health import router as health_router
from .view import router as view_router
from .weather import router as weather_router

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(view_router)
api_router.include_router(aircraft_router)
api_router.include_router(weather_router)

__all__ = ["api_router"]
