"""Greedy nearest-unvisited-neighbor sequencing."""

from __future__ import annotations

import math
from typing import Callable, Optional, Sequence

from ...models.domain import Position, Stop
from ..geospatial import distance_km

DistanceLookup = Callable[[int, int], float]


def sequence_stops(
    nodes: Sequence[Position],
    start_node: int,
    pool: Sequence[Stop],
    distance: Optional[DistanceLookup] = None,
) -> list[Stop]:
    """Order ``pool`` by repeatedly moving to the closest unvisited stop.

    ``nodes[start_node]`` is the traversal origin; the remaining nodes hold the
    positions of ``pool`` in order. The start node is never emitted. Equal
    distances resolve to the stop that came first in ``pool``, so the result is
    deterministic.

    Args:
        nodes: Node positions, ``len(pool) + 1`` of them.
        start_node: Index of the node the traversal starts from.
        pool: Stops to order.
        distance: Optional ``(i, j) -> km`` lookup between node indices, such
            as ``CandidateGraph.weight``. Defaults to geodesic distance.

    Returns:
        A permutation of ``pool``.
    """
    if not pool:
        return []
    if len(pool) == 1:
        return [pool[0]]

    if distance is None:
        def distance(i: int, j: int) -> float:
            return distance_km(nodes[i], nodes[j])

    # pool[k] lives at stop_nodes[k]
    stop_nodes = [node for node in range(len(nodes)) if node != start_node]
    visited = [False] * len(nodes)
    visited[start_node] = True
    ordered: list[Stop] = []
    current_node = start_node

    while len(ordered) < len(pool):
        nearest_node = -1
        nearest_index = -1
        nearest_distance = math.inf
        for index, node in enumerate(stop_nodes):
            if visited[node]:
                continue
            candidate = distance(current_node, node)
            # strict comparison keeps the lowest index on ties
            if nearest_node == -1 or candidate < nearest_distance:
                nearest_node = node
                nearest_index = index
                nearest_distance = candidate

        visited[nearest_node] = True
        ordered.append(pool[nearest_index])
        current_node = nearest_node

    return ordered
