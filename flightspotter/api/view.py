"""Observer view configuration endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request, status

from flightspotter.domain.geo import compass_point, view_cone_polygon
from flightspotter.models import ViewConfig, ViewStatusResponse
from flightspotter.services import PollingController

router = APIRouter(prefix="/api/v1", tags=["view"])

logger = logging.getLogger("flightspotter.api.view")


def _controller(request: Request) -> PollingController:
    return request.app.state.controller


def _view_status(controller: PollingController) -> ViewStatusResponse:
    config = controller.config
    if config is None:
        return ViewStatusResponse(state=controller.state.value, epoch=controller.epoch)
    return ViewStatusResponse(
        state=controller.state.value,
        epoch=controller.epoch,
        config=config,
        cone=view_cone_polygon(config),
        left_compass=compass_point(config.left_bearing),
        right_compass=compass_point(config.right_bearing),
    )


@router.get("/view", response_model=ViewStatusResponse, summary="Current view")
async def get_view(request: Request) -> ViewStatusResponse:
    return _view_status(_controller(request))


@router.put(
    "/view",
    response_model=ViewStatusResponse,
    status_code=status.HTTP_202_ACCEPTED,
    summary="Start polling for a view",
)
async def put_view(config: ViewConfig, request: Request) -> ViewStatusResponse:
    """Replace the active view; the previous polling cycle is superseded."""

    controller = _controller(request)
    try:
        controller.start(config)
    except RuntimeError as exc:
        logger.error("Cannot start polling: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)
        ) from exc
    return _view_status(controller)


@router.delete("/view", response_model=ViewStatusResponse, summary="Clear the view")
async def delete_view(request: Request) -> ViewStatusResponse:
    controller = _controller(request)
    try:
        controller.start(None)
    except RuntimeError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)
        ) from exc
    return _view_status(controller)
