import pytest

from delivery_router.data.sample_stops import get_sample_stops
from delivery_router.models.domain import Position, Stop, StopStatus
from delivery_router.services.journey import (
    add_stop,
    complete_delivery,
    is_journey_complete,
    promote_first_pending,
    start_journey,
)


def _stop(sid: str, lat: float, lon: float, status: StopStatus = StopStatus.PENDING) -> Stop:
    return Stop(
        stop_id=sid,
        name=f"Customer {sid}",
        address=f"{sid} Main Road",
        phone="+91 00000 00000",
        position=Position(lat, lon),
        status=status,
    )


def _statuses(route):
    return [(stop.stop_id, stop.status) for stop in route]


def test_start_journey_marks_first_stop_current():
    route = start_journey(get_sample_stops(), Position(12.9716, 77.5946))

    assert route[0].status is StopStatus.CURRENT
    assert all(stop.status is StopStatus.PENDING for stop in route[1:])
    assert len(route) == 5


def test_promote_first_pending_leaves_existing_current_alone():
    route = [_stop("A", 0, 0, StopStatus.COMPLETED), _stop("B", 0, 1, StopStatus.CURRENT), _stop("C", 0, 2)]

    assert promote_first_pending(route) == route
    assert promote_first_pending([]) == []


def test_complete_delivery_promotes_next_pending():
    route = [_stop("A", 0, 0, StopStatus.CURRENT), _stop("B", 0, 1), _stop("C", 0, 2)]

    updated = complete_delivery(route, "A")

    assert _statuses(updated) == [
        ("A", StopStatus.COMPLETED),
        ("B", StopStatus.CURRENT),
        ("C", StopStatus.PENDING),
    ]
    assert route[0].status is StopStatus.CURRENT


def test_completing_last_stop_finishes_journey():
    route = [_stop("A", 0, 0, StopStatus.COMPLETED), _stop("B", 0, 1, StopStatus.CURRENT)]

    updated = complete_delivery(route, "B")

    assert is_journey_complete(updated)
    assert not is_journey_complete(route)
    assert not is_journey_complete([])


def test_out_of_turn_delivery_keeps_current_stop():
    route = [_stop("A", 0, 0, StopStatus.CURRENT), _stop("B", 0, 1), _stop("C", 0, 2)]

    updated = complete_delivery(route, "B")

    assert _statuses(updated) == [
        ("A", StopStatus.CURRENT),
        ("B", StopStatus.COMPLETED),
        ("C", StopStatus.PENDING),
    ]


def test_complete_delivery_rejects_unknown_or_delivered_stops():
    route = [_stop("A", 0, 0, StopStatus.COMPLETED), _stop("B", 0, 1, StopStatus.CURRENT)]

    with pytest.raises(ValueError, match="not part of this route"):
        complete_delivery(route, "Z")
    with pytest.raises(ValueError, match="already been delivered"):
        complete_delivery(route, "A")


def test_add_stop_reoptimizes_without_touching_existing_statuses():
    route = [
        _stop("A", 0, 0, StopStatus.COMPLETED),
        _stop("B", 0, 5, StopStatus.CURRENT),
        _stop("C", 0, 9),
    ]
    new_stop = _stop("D", 0, 6, StopStatus.CURRENT)

    updated = add_stop(route, new_stop, Position(0, 1))

    assert _statuses(updated) == [
        ("A", StopStatus.COMPLETED),
        ("B", StopStatus.CURRENT),
        ("D", StopStatus.PENDING),
        ("C", StopStatus.PENDING),
    ]


def test_add_stop_rejects_duplicate_ids():
    route = [_stop("A", 0, 0)]

    with pytest.raises(ValueError, match="already part of this route"):
        add_stop(route, _stop("A", 1, 1))
