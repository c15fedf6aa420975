# tests/domain/test_greedy.py
import pytest

from pointgraph.domain.entities.geography import Point
from pointgraph.domain.graph.greedy import drain_greedy_path, greedy_path

SQUARE = [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]


def test_greedy_square_order_and_total():
    path = greedy_path(SQUARE)
    # (0,10) and (10,0) tie from the start; swap-removal puts (0,10) first in scan order
    assert path.order == [Point(0, 0), Point(0, 10), Point(10, 10), Point(10, 0)]
    assert path.total == 100 + 100 + 100
    assert [s.cumulative for s in path.steps] == [100, 200, 300]
    assert [s.seq for s in path.steps] == [2, 3, 4]
    assert [s.frac for s in path.steps] == [0.5, 0.75, 1.0]
    assert path.steps[0].src == Point(0, 0) and path.steps[-1].dst == Point(10, 0)


def test_greedy_path_leaves_input_untouched():
    pts = list(SQUARE)
    greedy_path(pts)
    assert pts == SQUARE


def test_drain_greedy_path_consumes_input():
    pts = list(SQUARE)
    path = drain_greedy_path(pts)
    assert pts == []
    assert path.total == 300


def test_greedy_is_an_open_path():
    pts = [Point(0, 0), Point(1, 0), Point(5, 0)]
    path = greedy_path(pts)
    assert path.order == pts
    assert path.total == 1 + 16  # no return leg to the start


def test_greedy_single_point():
    path = greedy_path(iter([Point(3, 3)]))
    assert path.order == [Point(3, 3)]
    assert path.steps == [] and path.total == 0


def test_greedy_empty_raises():
    with pytest.raises(ValueError):
        greedy_path([])
    with pytest.raises(ValueError):
        drain_greedy_path([])
