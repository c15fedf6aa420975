from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING

import numpy as np

from pointgraph.app.protocols import TreeWalker
from pointgraph.domain.entities.steps import PathPlan, PathStep

if TYPE_CHECKING:
    from pointgraph.domain.graph.distance_graph import DistanceGraph

StepCost = Callable[[int, int], int]


def dfs_order(graph: DistanceGraph, root: int) -> Iterator[int]:
    """
    Yield nodes in stack-DFS pop order.
    Nodes are marked on push; neighbors are pushed in ascending index order,
    so they come back out highest-first.
    """
    graph.check_node(root)
    seen = np.zeros(graph.n, dtype=bool)
    seen[root] = True
    stack = [root]
    while stack:
        top = stack.pop()
        for nxt in graph.neighbors(top):
            if not seen[nxt]:
                seen[nxt] = True
                stack.append(nxt)
        yield top


def _walk(graph: DistanceGraph, root: int, cost: StepCost) -> PathPlan:
    plan = PathPlan(root=root)
    previous = root
    for node in dfs_order(graph, root):
        # the root pop is a self step and costs nothing
        if plan.order:
            d = cost(previous, node)
            plan.total += d
            seq = len(plan.order) + 1
            plan.steps.append(
                PathStep(
                    src=previous,
                    dst=node,
                    seq=seq,
                    frac=seq / graph.n,
                    distance=d,
                    cumulative=plan.total,
                )
            )
        plan.order.append(node)
        previous = node
    return plan


def walk_against_reference(tree: DistanceGraph, root: int, reference: DistanceGraph) -> PathPlan:
    """DFS over `tree`, charging each hop at its weight in `reference`."""
    if reference.n != tree.n:
        raise ValueError(f"reference graph has {reference.n} nodes, tree has {tree.n}")

    def cost(prev: int, node: int) -> int:
        w = reference.weight(node, prev)
        if w is None:
            raise ValueError(f"reference graph has no edge between {prev} and {node}")
        return w

    return _walk(tree, root, cost)


def walk_point_to_point(tree: DistanceGraph, root: int) -> PathPlan:
    """
    DFS over `tree`, charging the point distance between consecutive pops.
    The hop is measured from the previously popped node, not the tree parent,
    so backtracking can cost more than the tree edges it crosses.
    """
    if len(tree.points) != tree.n:
        raise ValueError("point-to-point walk needs one point per node")
    pts = tree.points
    return _walk(tree, root, lambda prev, node: pts[prev].distance(pts[node]))


class ReferenceGraphWalker(TreeWalker):
    policy = "reference_graph"

    def __init__(self, reference: DistanceGraph):
        self.reference = reference

    def walk(self, tree: DistanceGraph, root: int) -> PathPlan:
        return walk_against_reference(tree, root, self.reference)


class PointDistanceWalker(TreeWalker):
    policy = "point_distance"

    def walk(self, tree: DistanceGraph, root: int) -> PathPlan:
        return walk_point_to_point(tree, root)
