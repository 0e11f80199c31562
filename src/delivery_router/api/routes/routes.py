"""Routing endpoints."""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from fastapi import APIRouter, HTTPException, status

from ...data.sample_stops import get_sample_stops
from ...schemas.routing import (
    AddStopRequest,
    CompleteDeliveryRequest,
    OptimizeRouteRequest,
    OptimizeRouteResponse,
    StopModel,
)
from ...services.routing import service as routing_service

router = APIRouter(prefix="/routes", tags=["routes"])
logger = logging.getLogger(__name__)

T = TypeVar("T")


def _run(action: str, func: Callable[[T], OptimizeRouteResponse], payload: T) -> OptimizeRouteResponse:
    try:
        return func(payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception(f"Error trying to {action}: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to {action}: {str(exc)}"
        ) from exc


@router.post("/optimize", response_model=OptimizeRouteResponse, status_code=status.HTTP_200_OK)
def optimize(payload: OptimizeRouteRequest) -> OptimizeRouteResponse:
    return _run("optimize route", routing_service.optimize, payload)


@router.post("/start", response_model=OptimizeRouteResponse, status_code=status.HTTP_200_OK)
def start_journey(payload: OptimizeRouteRequest) -> OptimizeRouteResponse:
    """Optimize the stops and mark the first one as the current delivery."""
    return _run("start journey", routing_service.start, payload)


@router.post("/add-stop", response_model=OptimizeRouteResponse, status_code=status.HTTP_200_OK)
def add_stop(payload: AddStopRequest) -> OptimizeRouteResponse:
    """Add a pending stop to an existing route and re-optimize it."""
    return _run("add stop", routing_service.add_stop, payload)


@router.post("/complete", response_model=OptimizeRouteResponse, status_code=status.HTTP_200_OK)
def complete_delivery(payload: CompleteDeliveryRequest) -> OptimizeRouteResponse:
    """Mark a stop as delivered and promote the next pending stop."""
    return _run("complete delivery", routing_service.complete, payload)


@router.get("/sample", response_model=list[StopModel], status_code=status.HTTP_200_OK)
def sample_stops() -> list[StopModel]:
    return [StopModel.from_domain(stop) for stop in get_sample_stops()]
