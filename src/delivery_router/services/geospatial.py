"""Geospatial helper functions."""

from __future__ import annotations

import math
from typing import Sequence

from ..models.domain import Position

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    # rounding can leave a marginally outside [0, 1] for antipodal points
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def distance_km(a: Position, b: Position) -> float:
    """Great-circle distance between two positions in kilometres."""

    if a == b:
        return 0.0
    return haversine_km(a.latitude, a.longitude, b.latitude, b.longitude)


def path_length_km(positions: Sequence[Position]) -> float:
    """Total length of the polyline visiting ``positions`` in order."""

    return sum(distance_km(positions[i], positions[i + 1]) for i in range(len(positions) - 1))


def centroid(positions: Sequence[Position]) -> Position | None:
    """Arithmetic mean of the positions, used to centre map views."""

    if not positions:
        return None
    latitude = sum(p.latitude for p in positions) / len(positions)
    longitude = sum(p.longitude for p in positions) / len(positions)
    return Position(latitude=latitude, longitude=longitude)
