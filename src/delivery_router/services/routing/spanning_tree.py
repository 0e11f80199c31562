"""Minimum spanning tree reduction of the candidate graph (Kruskal)."""

from __future__ import annotations

from typing import Sequence

from ...models.domain import Position
from .models import WeightedEdge


class DisjointSetForest:
    """Array-backed union-find over the local node index space."""

    def __init__(self, size: int) -> None:
        self.parent = list(range(size))

    def find(self, x: int) -> int:
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        # Path compression
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Attach the root of ``y`` under the root of ``x``; False if already joined."""
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return False
        self.parent[root_y] = root_x
        return True


def reduce_to_spanning_tree(nodes: Sequence[Position], edges: Sequence[WeightedEdge]) -> list[WeightedEdge]:
    """Return the minimum spanning tree edges of the candidate graph.

    ``sorted`` is stable, so edges of equal weight are considered in their
    generation order and the result is reproducible.
    """
    target = len(nodes) - 1
    if target <= 0:
        return []

    forest = DisjointSetForest(len(nodes))
    tree: list[WeightedEdge] = []
    for edge in sorted(edges, key=lambda e: e.distance_km):
        if forest.union(edge.a, edge.b):
            tree.append(edge)
            if len(tree) == target:
                break
    return tree


def tree_weight_km(tree: Sequence[WeightedEdge]) -> float:
    return sum(edge.distance_km for edge in tree)
