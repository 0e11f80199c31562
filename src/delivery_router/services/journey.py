"""Delivery journey lifecycle.

Stop status transitions belong to the caller, not the sequencing engine:
``pending -> current`` when the previous current stop is delivered, and
``current -> completed`` on delivery confirmation. These helpers apply those
transitions on top of an engine-ordered route and always return new lists.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional, Sequence

from ..models.domain import Position, Stop, StopStatus
from .routing.engine import optimize_route

logger = logging.getLogger(__name__)


def promote_first_pending(route: Sequence[Stop]) -> list[Stop]:
    """Mark the first non-completed stop as current when no stop is current yet."""
    updated = list(route)
    if any(stop.status is StopStatus.CURRENT for stop in updated):
        return updated
    for index, stop in enumerate(updated):
        if stop.status is StopStatus.PENDING:
            updated[index] = replace(stop, status=StopStatus.CURRENT)
            break
    return updated


def start_journey(stops: Sequence[Stop], starting_position: Optional[Position] = None) -> list[Stop]:
    """Optimize a fresh stop set and make its first stop the current one."""
    route = promote_first_pending(optimize_route(stops, starting_position))
    logger.info(f"Journey started with {len(route)} stops")
    return route


def complete_delivery(route: Sequence[Stop], stop_id: str) -> list[Stop]:
    """Mark ``stop_id`` as delivered and promote the next pending stop after it."""
    updated = list(route)
    completed_index = next((i for i, stop in enumerate(updated) if stop.stop_id == stop_id), None)
    if completed_index is None:
        raise ValueError(f"Stop '{stop_id}' is not part of this route.")

    stop = updated[completed_index]
    if stop.status is StopStatus.COMPLETED:
        raise ValueError(f"Stop '{stop_id}' has already been delivered.")

    was_current = stop.status is StopStatus.CURRENT
    updated[completed_index] = replace(stop, status=StopStatus.COMPLETED)

    # a pending stop delivered out of turn leaves the current stop in place
    if was_current or not any(s.status is StopStatus.CURRENT for s in updated):
        for index in range(completed_index + 1, len(updated)):
            if updated[index].status is StopStatus.PENDING:
                updated[index] = replace(updated[index], status=StopStatus.CURRENT)
                break

    logger.info(f"Delivery to {stop.name or stop_id} marked as completed")
    return updated


def add_stop(
    route: Sequence[Stop],
    new_stop: Stop,
    starting_position: Optional[Position] = None,
) -> list[Stop]:
    """Insert a new pending stop and re-optimize the remaining route.

    Existing statuses are kept as they are and completed stops stay in their
    original order at the front.
    """
    if any(stop.stop_id == new_stop.stop_id for stop in route):
        raise ValueError(f"Stop '{new_stop.stop_id}' is already part of this route.")
    if new_stop.status is not StopStatus.PENDING:
        new_stop = replace(new_stop, status=StopStatus.PENDING)

    reoptimized = optimize_route([*route, new_stop], starting_position)
    logger.info(f"Added stop {new_stop.stop_id}; route now has {len(reoptimized)} stops")
    return reoptimized


def is_journey_complete(route: Sequence[Stop]) -> bool:
    return bool(route) and all(stop.status is StopStatus.COMPLETED for stop in route)
