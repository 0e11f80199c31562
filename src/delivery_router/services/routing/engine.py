"""Route sequencing engine.

Completed stops keep their original order at the front of the route. The
remaining stops are sequenced greedily from the traversal origin: the current
stop's own location when one exists (it is always the next destination),
otherwise the caller's starting position or the configured default.

The engine is a pure computation: it never mutates its input, performs no I/O
and keeps no state between calls.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ...config import settings
from ...models.domain import Position, Stop, StopStatus
from ..geospatial import distance_km
from .graph import build_graph
from .models import RouteLeg, RoutePlan
from .partition import partition_stops
from .sequencer import sequence_stops
from .spanning_tree import reduce_to_spanning_tree, tree_weight_km

logger = logging.getLogger(__name__)


def default_start_position() -> Position:
    return Position(latitude=settings.default_start_latitude, longitude=settings.default_start_longitude)


def _legs(route: Sequence[Stop], origin: Position, first_index: int) -> tuple[list[RouteLeg], float]:
    legs: list[RouteLeg] = []
    total = 0.0
    previous = origin
    for sequence, stop in enumerate(route[first_index:], start=1):
        step = distance_km(previous, stop.position)
        total += step
        legs.append(RouteLeg(stop_id=stop.stop_id, sequence=sequence, distance_from_prev_km=step))
        previous = stop.position
    return legs, total


def plan_route(
    stops: Sequence[Stop],
    starting_position: Optional[Position] = None,
    *,
    default_position: Optional[Position] = None,
    use_spanning_tree: Optional[bool] = None,
) -> RoutePlan:
    """Sequence ``stops`` and report straight-line leg distances.

    Args:
        stops: Stops in any mixture of statuses. Not modified.
        starting_position: Caller's live position, if known.
        default_position: Fallback when neither a current stop nor a starting
            position is available. Defaults to the configured coordinate.
        use_spanning_tree: Build the minimum spanning tree of the candidate
            graph and report its weight. Defaults to ``settings.use_spanning_tree``.

    Returns:
        RoutePlan whose ``stops`` is a new list: completed stops in input order
        followed by the sequenced current and pending stops.
    """
    if not stops:
        return RoutePlan(stops=[], origin=None, legs=[], total_distance_km=0.0, spanning_tree_km=None)

    if use_spanning_tree is None:
        use_spanning_tree = settings.use_spanning_tree

    partition = partition_stops(stops)
    route: list[Stop] = list(partition.completed)

    if partition.current is not None:
        origin = partition.current.position
        route.append(partition.current)
    else:
        origin = starting_position or default_position or default_start_position()

    pool = partition.pending
    spanning_tree_km: Optional[float] = None

    if len(pool) > 1:
        graph = build_graph(origin, pool)
        if use_spanning_tree:
            tree = reduce_to_spanning_tree(graph.nodes, graph.edges)
            spanning_tree_km = tree_weight_km(tree)
        route.extend(sequence_stops(graph.nodes, 0, pool, distance=graph.weight))
    else:
        route.extend(pool)

    # legs are measured from the caller's side of the current stop, if any
    leg_origin = starting_position or origin
    legs, total = _legs(route, leg_origin, len(partition.completed))

    logger.debug(
        f"Sequenced {len(route) - len(partition.completed)} stops "
        f"({len(partition.completed)} completed kept in place), {total:.2f} km straight-line"
    )
    return RoutePlan(
        stops=route,
        origin=origin,
        legs=legs,
        total_distance_km=total,
        spanning_tree_km=spanning_tree_km,
    )


def summarize_route(route: Sequence[Stop], starting_position: Optional[Position] = None) -> RoutePlan:
    """Measure an already-ordered route without resequencing it.

    Legs cover the stops after the leading completed ones, starting from
    ``starting_position`` or, when absent, from the first remaining stop.
    """
    route = list(route)
    first_open = next(
        (i for i, stop in enumerate(route) if stop.status is not StopStatus.COMPLETED),
        len(route),
    )
    if first_open == len(route):
        return RoutePlan(stops=route, origin=starting_position, legs=[], total_distance_km=0.0, spanning_tree_km=None)

    origin = starting_position or route[first_open].position
    legs, total = _legs(route, origin, first_open)
    return RoutePlan(stops=route, origin=origin, legs=legs, total_distance_km=total, spanning_tree_km=None)


def optimize_route(
    stops: Sequence[Stop],
    starting_position: Optional[Position] = None,
    *,
    default_position: Optional[Position] = None,
    use_spanning_tree: Optional[bool] = None,
) -> list[Stop]:
    """Return a new visiting order for ``stops``; see :func:`plan_route`."""
    return plan_route(
        stops,
        starting_position,
        default_position=default_position,
        use_spanning_tree=use_spanning_tree,
    ).stops
