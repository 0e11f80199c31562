import math

import pytest

from delivery_router.models.domain import Position
from delivery_router.services.geospatial import (
    EARTH_RADIUS_KM,
    centroid,
    distance_km,
    haversine_km,
    path_length_km,
)


def test_one_degree_of_longitude_on_the_equator():
    expected = EARTH_RADIUS_KM * math.pi / 180

    assert haversine_km(0.0, 0.0, 0.0, 1.0) == pytest.approx(expected, rel=1e-12)


def test_distance_is_zero_for_identical_positions():
    position = Position(12.9716, 77.5946)

    assert distance_km(position, Position(12.9716, 77.5946)) == 0.0


@pytest.mark.parametrize(
    "a, b",
    [
        (Position(12.9647, 77.6082), Position(12.9116, 77.6416)),
        (Position(-33.8688, 151.2093), Position(51.5074, -0.1278)),
        (Position(89.9, 10.0), Position(-89.9, -170.0)),
        (Position(0.0, -179.5), Position(0.0, 179.5)),
    ],
)
def test_distance_is_symmetric_and_positive(a: Position, b: Position):
    forward = distance_km(a, b)
    backward = distance_km(b, a)

    assert forward > 0
    assert forward == pytest.approx(backward, rel=1e-9)


def test_antipodal_points_do_not_raise():
    assert distance_km(Position(0.0, 0.0), Position(0.0, 180.0)) == pytest.approx(math.pi * EARTH_RADIUS_KM)
    assert distance_km(Position(90.0, 0.0), Position(-90.0, 0.0)) == pytest.approx(math.pi * EARTH_RADIUS_KM)


def test_out_of_range_coordinates_are_tolerated():
    assert distance_km(Position(123.0, 400.0), Position(-95.0, -720.0)) >= 0


def test_path_length_and_centroid():
    path = [Position(0.0, 0.0), Position(0.0, 1.0), Position(0.0, 3.0)]

    assert path_length_km(path) == pytest.approx(haversine_km(0.0, 0.0, 0.0, 3.0))
    assert path_length_km(path[:1]) == 0.0
    assert centroid(path) == Position(0.0, 4.0 / 3.0)
    assert centroid([]) is None
