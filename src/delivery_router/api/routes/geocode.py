"""Geocoding endpoint."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...schemas.routing import GeocodeRequest, GeocodeResponse, PositionModel
from ...services.geocoding import geocode_or_default
from ...services.routing.engine import default_start_position

router = APIRouter(tags=["geocoding"])


@router.post("/geocode", response_model=GeocodeResponse, status_code=status.HTTP_200_OK)
def geocode(payload: GeocodeRequest) -> GeocodeResponse:
    """Resolve an address; unresolved addresses get the default position."""
    position, resolved = geocode_or_default(payload.address, default_start_position())
    return GeocodeResponse(
        address=payload.address,
        location=PositionModel.from_domain(position),
        resolved=resolved,
    )
