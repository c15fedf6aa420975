# tests/domain/test_traversal.py
import pytest

from pointgraph.app.protocols import TreeWalker
from pointgraph.domain.entities.geography import Point
from pointgraph.domain.graph.distance_graph import DistanceGraph
from pointgraph.domain.graph.traversal import (
    PointDistanceWalker,
    ReferenceGraphWalker,
    dfs_order,
    walk_against_reference,
    walk_point_to_point,
)

# ---------- Fixtures

STAR_POINTS = [Point(0, 0), Point(1, 0), Point(0, 2), Point(3, 0)]


@pytest.fixture
def path_tree() -> DistanceGraph:
    g = DistanceGraph(4)
    g.add_edge(0, 1, 1)
    g.add_edge(1, 2, 2)
    g.add_edge(2, 3, 3)
    return g


@pytest.fixture
def star_tree() -> DistanceGraph:
    """Node 0 in the middle, leaves 1..3, weighted by point distance."""
    g = DistanceGraph(4, STAR_POINTS)
    for leaf in (1, 2, 3):
        g.add_edge(0, leaf, STAR_POINTS[0].distance(STAR_POINTS[leaf]))
    return g


# ---------- DFS order


def test_dfs_on_path_graph(path_tree):
    assert list(dfs_order(path_tree, 0)) == [0, 1, 2, 3]
    assert list(dfs_order(path_tree, 2)) == [2, 3, 1, 0]


def test_dfs_pops_neighbors_highest_first(star_tree):
    assert list(dfs_order(star_tree, 0)) == [0, 3, 2, 1]


def test_dfs_backtracks_before_descending():
    g = DistanceGraph(4)
    g.add_edge(0, 1, 1)
    g.add_edge(0, 2, 1)
    g.add_edge(1, 3, 1)
    assert list(dfs_order(g, 0)) == [0, 2, 1, 3]


def test_dfs_root_out_of_range(path_tree):
    with pytest.raises(IndexError):
        list(dfs_order(path_tree, 4))


# ---------- Reference-graph policy


def test_path_distance_on_path_graph_is_sum_of_weights(path_tree):
    assert path_tree.path_distance_via_dfs(0, path_tree) == 1 + 2 + 3


def test_walk_against_complete_graph(star_tree):
    full = DistanceGraph.from_points(STAR_POINTS)
    plan = walk_against_reference(star_tree, 0, full)
    assert plan.order == [0, 3, 2, 1]
    assert plan.edges() == [(0, 3), (3, 2), (2, 1)]
    assert [s.distance for s in plan.steps] == [9, 13, 5]
    assert [s.cumulative for s in plan.steps] == [9, 22, 27]
    assert [s.seq for s in plan.steps] == [2, 3, 4]
    assert [s.frac for s in plan.steps] == [0.5, 0.75, 1.0]
    assert plan.total == 27
    assert star_tree.path_distance_via_dfs(0, full) == 27


def test_reference_without_the_hop_raises(star_tree):
    # 3 -> 2 is not a tree edge
    with pytest.raises(ValueError):
        walk_against_reference(star_tree, 0, star_tree)


def test_reference_size_mismatch_raises(path_tree):
    with pytest.raises(ValueError):
        walk_against_reference(path_tree, 0, DistanceGraph(5))


def test_single_node_walk_is_empty():
    g = DistanceGraph.from_points([Point(2, 2)])
    plan = walk_against_reference(g, 0, g)
    assert plan.order == [0] and plan.steps == [] and plan.total == 0


# ---------- Point-to-point policy


def test_point_walk_charges_consecutive_pops(star_tree):
    plan = walk_point_to_point(star_tree, 0)
    assert plan.total == 27
    # backtracking overcounts relative to the tree's own edges
    assert star_tree.total_weight() == 1 + 4 + 9
    assert plan.total > star_tree.total_weight()


def test_point_walk_needs_points(path_tree):
    with pytest.raises(ValueError):
        walk_point_to_point(path_tree, 0)


def test_walkers_follow_protocol(star_tree):
    full = DistanceGraph.from_points(STAR_POINTS)
    ref, pt = ReferenceGraphWalker(full), PointDistanceWalker()
    assert isinstance(ref, TreeWalker) and isinstance(pt, TreeWalker)
    assert ref.walk(star_tree, 0).total == pt.walk(star_tree, 0).total == 27
    assert (ref.policy, pt.policy) == ("reference_graph", "point_distance")


def test_mst_walk_from_square():
    pts = [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]
    full = DistanceGraph.from_points(pts)
    tree = full.spanning_tree(0)
    plan = walk_against_reference(tree, 0, full)
    assert plan.order == [0, 3, 1, 2]
    assert plan.total == 100 + 200 + 100
