"""Routing domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ...models.domain import Position, Stop


@dataclass(frozen=True, slots=True)
class WeightedEdge:
    a: int
    b: int
    distance_km: float


@dataclass(slots=True)
class CandidateGraph:
    """Complete graph over the traversal origin (node 0) and the stops to sequence."""

    nodes: List[Position]
    edges: List[WeightedEdge]
    _weights: dict[tuple[int, int], float] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        for edge in self.edges:
            self._weights[(edge.a, edge.b)] = edge.distance_km
            self._weights[(edge.b, edge.a)] = edge.distance_km

    def weight(self, i: int, j: int) -> float:
        if i == j:
            return 0.0
        return self._weights[(i, j)]


@dataclass(slots=True)
class Partition:
    completed: List[Stop]
    current: Optional[Stop]
    pending: List[Stop]


@dataclass(slots=True)
class RouteLeg:
    stop_id: str
    sequence: int
    distance_from_prev_km: float


@dataclass(slots=True)
class RoutePlan:
    stops: List[Stop]
    origin: Optional[Position]
    legs: List[RouteLeg]
    total_distance_km: float
    spanning_tree_km: Optional[float]
