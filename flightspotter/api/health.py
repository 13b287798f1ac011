"""Health check endpoint."""

from fastapi import APIRouter, Request

from flightspotter.config import settings

router = APIRouter()


@router.get("/healthz", summary="Health check")
def health_check(request: Request) -> dict[str, str]:
    """Report liveness and the polling state."""
    controller = getattr(request.app.state, "controller", None)
    polling = controller.state.value if controller is not None else "unavailable"
    return {"status": "ok", "env": settings.flightspotter_env, "polling": polling}
