from collections.abc import Iterable

from pointgraph.domain.entities.geography import Point, swap_remove
from pointgraph.domain.entities.steps import GreedyPath, GreedyStep


def _greedy(working: list[Point]) -> GreedyPath:
    if not working:
        raise ValueError("greedy path needs at least one point")
    n = len(working)
    current = swap_remove(working, 0)
    path = GreedyPath(order=[current])
    while working:
        nxt = current.closest(working)
        d = current.distance(nxt)
        path.total += d
        seq = n - len(working)
        path.steps.append(
            GreedyStep(
                src=current, dst=nxt, seq=seq, frac=seq / n, distance=d, cumulative=path.total
            )
        )
        path.order.append(nxt)
        current = nxt
    return path


def greedy_path(points: Iterable[Point]) -> GreedyPath:
    """Open nearest-neighbor path starting at the first point. The input is not modified."""
    return _greedy(list(points))


def drain_greedy_path(points: list[Point]) -> GreedyPath:
    """Same as greedy_path, but consumes `points` in place; the list ends empty."""
    return _greedy(points)
