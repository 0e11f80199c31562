"""Candidate graph construction.

Every pair of nodes gets an edge, so the graph has N(N+1)/2 edges for N stops
plus the origin. Delivery runs hold tens of stops, which keeps the quadratic
build well under a millisecond; no spatial index is used.
"""

from __future__ import annotations

from typing import Sequence

from ...models.domain import Position, Stop
from ..geospatial import distance_km
from .models import CandidateGraph, WeightedEdge


def build_graph(origin: Position, stops: Sequence[Stop]) -> CandidateGraph:
    """Build the complete graph over ``origin`` (node 0) and ``stops`` (nodes 1..N).

    Edges are generated in pair-index order, ``(0, 1), (0, 2), ..., (1, 2), ...``,
    which later serves as the tie-break order for equal weights.
    """
    nodes = [origin, *(stop.position for stop in stops)]
    edges: list[WeightedEdge] = []

    for i in range(len(nodes)):
        for j in range(i + 1, len(nodes)):
            edges.append(WeightedEdge(a=i, b=j, distance_km=distance_km(nodes[i], nodes[j])))

    return CandidateGraph(nodes=nodes, edges=edges)
