from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pointgraph.domain.entities.steps import PathPlan

if TYPE_CHECKING:
    from pointgraph.domain.graph.distance_graph import DistanceGraph


@runtime_checkable
class TreeWalker(Protocol):
    """
    Responsibilities:
      • Walk a tree (or any DistanceGraph) depth-first from a root.
      • Charge each hop under one fixed accumulation policy.
    Distances are squared; totals are sums of squared distances.
    """

    policy: str

    def walk(self, tree: DistanceGraph, root: int) -> PathPlan: ...
