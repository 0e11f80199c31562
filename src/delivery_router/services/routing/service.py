"""Routing orchestration service."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import httpx

from ...models.domain import Position, Stop, StopStatus
from ...schemas.routing import (
    AddStopRequest,
    CompleteDeliveryRequest,
    OptimizeRouteRequest,
    OptimizeRouteResponse,
    PositionModel,
    RoadGeometryModel,
    RouteLegModel,
    StopModel,
)
from .. import journey
from ..geocoding import geocode_or_default
from ..geospatial import centroid, path_length_km
from .engine import default_start_position, plan_route, summarize_route
from .models import RoutePlan
from .osrm_client import OSRMClient, decode_polyline

logger = logging.getLogger(__name__)


def _to_domain(stops: Sequence[StopModel]) -> list[Stop]:
    seen: set[str] = set()
    for stop in stops:
        if stop.id in seen:
            raise ValueError(f"Duplicate stop id '{stop.id}' in request.")
        seen.add(stop.id)
    return [stop.to_domain() for stop in stops]


def _starting_position(payload: OptimizeRouteRequest) -> Optional[Position]:
    return payload.starting_position.to_domain() if payload.starting_position else None


def _display_waypoints(route: Sequence[Stop], start: Optional[Position]) -> list[Position]:
    waypoints = [start] if start is not None else []
    waypoints.extend(stop.position for stop in route if stop.status is not StopStatus.COMPLETED)
    return waypoints


def fetch_road_geometry(route: Sequence[Stop], start: Optional[Position]) -> tuple[Optional[RoadGeometryModel], Optional[str]]:
    """Road polyline through the remaining stops, for display only.

    Falls back to straight segments when OSRM is not configured or fails.
    Returns the geometry and the error that caused a fallback, if any.
    """
    waypoints = _display_waypoints(route, start)
    if len(waypoints) < 2:
        return None, None

    straight = RoadGeometryModel(
        source="straight_line",
        coordinates=[[p.latitude, p.longitude] for p in waypoints],
        distance_km=path_length_km(waypoints),
    )

    try:
        osrm_client = OSRMClient()
    except ValueError as e:
        return straight, str(e)

    try:
        data = osrm_client.route([p.as_tuple() for p in waypoints])
        best = data["routes"][0]
        coordinates = decode_polyline(best["geometry"])
        return (
            RoadGeometryModel(
                source="osrm",
                coordinates=[[lat, lon] for lat, lon in coordinates],
                distance_km=float(best.get("distance", 0.0)) / 1000.0,
            ),
            None,
        )
    except (httpx.HTTPError, ConnectionError, ValueError, KeyError, IndexError, TypeError) as e:
        logger.warning(f"Road geometry unavailable, drawing straight segments: {e}")
        return straight, str(e)


def build_response(
    plan: RoutePlan,
    *,
    starting_position: Optional[Position] = None,
    include_road_geometry: bool = False,
    route: Optional[Sequence[Stop]] = None,
    metadata: Optional[dict] = None,
) -> OptimizeRouteResponse:
    """Convert an engine plan into the API response.

    ``route`` overrides ``plan.stops`` when statuses were updated after
    sequencing (e.g. the first stop promoted to current).
    """
    stops = list(route) if route is not None else plan.stops
    meta = {
        "algorithm": "nearest_neighbor",
        "distance_metric": "haversine",
        "stop_count": len(stops),
        "completed_count": sum(1 for stop in stops if stop.status is StopStatus.COMPLETED),
    }
    if metadata:
        meta.update(metadata)

    road_geometry = None
    if include_road_geometry:
        road_geometry, error = fetch_road_geometry(stops, starting_position or plan.origin)
        if error:
            meta["road_geometry_error"] = error

    center = centroid([stop.position for stop in stops])
    return OptimizeRouteResponse(
        stops=[StopModel.from_domain(stop) for stop in stops],
        origin=PositionModel.from_domain(plan.origin) if plan.origin else None,
        legs=[
            RouteLegModel(
                stop_id=leg.stop_id,
                sequence=leg.sequence,
                distance_from_prev_km=leg.distance_from_prev_km,
            )
            for leg in plan.legs
        ],
        total_distance_km=plan.total_distance_km,
        spanning_tree_km=plan.spanning_tree_km,
        map_center=PositionModel.from_domain(center) if center else None,
        road_geometry=road_geometry,
        journey_complete=journey.is_journey_complete(stops),
        metadata=meta,
    )


def optimize(payload: OptimizeRouteRequest) -> OptimizeRouteResponse:
    stops = _to_domain(payload.stops)
    start = _starting_position(payload)
    plan = plan_route(stops, start)
    logger.info(f"Optimized route for {len(stops)} stops ({plan.total_distance_km:.2f} km)")
    return build_response(plan, starting_position=start, include_road_geometry=payload.include_road_geometry)


def start(payload: OptimizeRouteRequest) -> OptimizeRouteResponse:
    stops = _to_domain(payload.stops)
    start_position = _starting_position(payload)
    plan = plan_route(stops, start_position)
    route = journey.promote_first_pending(plan.stops)
    logger.info(f"Journey started with {len(route)} stops")
    return build_response(
        plan,
        starting_position=start_position,
        include_road_geometry=payload.include_road_geometry,
        route=route,
    )


def add_stop(payload: AddStopRequest) -> OptimizeRouteResponse:
    stops = _to_domain(payload.stops)
    start_position = _starting_position(payload)
    new = payload.new_stop

    geocoded = None
    if new.location is not None:
        position = new.location.to_domain()
    else:
        position, geocoded = geocode_or_default(new.address, start_position or default_start_position())

    new_stop = Stop(
        stop_id=new.id,
        name=new.name,
        address=new.address,
        phone=new.phone,
        position=position,
        status=StopStatus.PENDING,
    )
    route = journey.add_stop(stops, new_stop, start_position)
    plan = summarize_route(route, start_position)

    metadata: dict = {"added_stop_id": new.id}
    if geocoded is not None:
        metadata["geocoded"] = geocoded
    return build_response(
        plan,
        starting_position=start_position,
        include_road_geometry=payload.include_road_geometry,
        metadata=metadata,
    )


def complete(payload: CompleteDeliveryRequest) -> OptimizeRouteResponse:
    route = journey.complete_delivery(_to_domain(payload.stops), payload.stop_id)
    # statuses change, the order does not
    plan = summarize_route(route)
    return build_response(plan, metadata={"completed_stop_id": payload.stop_id})
