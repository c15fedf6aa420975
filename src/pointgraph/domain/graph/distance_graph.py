from __future__ import annotations

from collections.abc import Iterator, Sequence

import numpy as np

from pointgraph.domain.entities.geography import U32_MAX, Point
from pointgraph.domain.entities.steps import TreeEdge

# Legacy "no edge" value, only used when exporting the matrix.
NO_EDGE = U32_MAX
_UNREACHABLE = np.iinfo(np.int64).max


class DistanceGraph:
    """
    Dense symmetric graph over n nodes.

    Weights live in a uint32 matrix; edge presence is tracked by a separate
    boolean mask, so the full u32 range is usable for real distances.
    """

    def __init__(self, n: int, points: Sequence[Point] | None = None):
        if n < 0:
            raise ValueError(f"node count must be >= 0, got {n}")
        if points is not None and len(points) != n:
            raise ValueError(f"expected {n} points, got {len(points)}")
        self.n = n
        self.points: tuple[Point, ...] = tuple(points) if points is not None else ()
        self._w = np.zeros((n, n), dtype=np.uint32)
        self._has = np.zeros((n, n), dtype=bool)

    @classmethod
    def from_points(cls, points: Sequence[Point]) -> DistanceGraph:
        g = cls(len(points), points)
        for i, pt in enumerate(points):
            for j in range(i + 1, g.n):
                g.add_edge(i, j, pt.distance(points[j]))
        return g

    # --------------- Helpers -----------------------------

    def check_node(self, i: int) -> int:
        if not 0 <= i < self.n:
            raise IndexError(f"node {i} out of range for graph of {self.n} nodes")
        return i

    def _derive(self) -> DistanceGraph:
        return DistanceGraph(self.n, self.points if self.points else None)

    # --------------- Edges -----------------------------

    def add_edge(self, i: int, j: int, dist: int) -> None:
        self.check_node(i)
        self.check_node(j)
        if not 0 <= dist <= U32_MAX:
            raise OverflowError(f"distance {dist} does not fit u32")
        self._w[i, j] = self._w[j, i] = dist
        self._has[i, j] = self._has[j, i] = True

    def has_edge(self, i: int, j: int) -> bool:
        return bool(self._has[self.check_node(i), self.check_node(j)])

    def weight(self, i: int, j: int) -> int | None:
        if not self.has_edge(i, j):
            return None
        return int(self._w[i, j])

    def neighbors(self, i: int) -> list[int]:
        return [int(j) for j in np.flatnonzero(self._has[self.check_node(i)])]

    def edges(self) -> Iterator[tuple[int, int, int]]:
        """Yield (i, j, weight) once per edge, with i < j."""
        rows, cols = np.nonzero(np.triu(self._has, k=1))
        for i, j in zip(rows.tolist(), cols.tolist()):
            yield i, j, int(self._w[i, j])

    def edge_count(self) -> int:
        return int(np.count_nonzero(np.triu(self._has, k=1)))

    def total_weight(self) -> int:
        return sum(w for _, _, w in self.edges())

    def as_array(self, no_edge: int = NO_EDGE) -> np.ndarray:
        return np.where(self._has, self._w, np.uint32(no_edge)).astype(np.uint32)

    # --------------- Spanning tree -----------------------------

    def _prim(self, root: int) -> Iterator[TreeEdge]:
        if self.n == 0:
            return
        self.check_node(root)
        cost = np.where(self._has, self._w.astype(np.int64), _UNREACHABLE)
        in_tree = [root]
        mask = np.zeros(self.n, dtype=bool)
        mask[root] = True
        while len(in_tree) < self.n:
            outside = np.flatnonzero(~mask)
            # rows follow insertion order, columns ascend: the first row-major
            # argmin is the first minimal pair of the nested scan.
            frontier = cost[np.ix_(in_tree, outside)]
            r, c = np.unravel_index(int(np.argmin(frontier)), frontier.shape)
            if frontier[r, c] == _UNREACHABLE:
                raise ValueError(
                    f"graph is disconnected: {len(in_tree)} of {self.n} nodes reachable from {root}"
                )
            parent, child = in_tree[int(r)], int(outside[c])
            mask[child] = True
            in_tree.append(child)
            yield TreeEdge(
                child=child,
                parent=parent,
                weight=int(self._w[child, parent]),
                seq=len(in_tree),
                frac=len(in_tree) / self.n,
            )

    def spanning_tree_steps(self, root: int) -> list[TreeEdge]:
        return list(self._prim(root))

    def spanning_tree(self, root: int) -> DistanceGraph:
        """Minimum spanning tree from `root` (Prim). Leaves self unchanged."""
        tree = self._derive()
        for e in self._prim(root):
            tree.add_edge(e.child, e.parent, e.weight)
        return tree

    def path_distance_via_dfs(self, root: int, reference: DistanceGraph) -> int:
        from pointgraph.domain.graph.traversal import walk_against_reference

        return walk_against_reference(self, root, reference).total

    def __repr__(self) -> str:
        return f"DistanceGraph(n={self.n}, edges={self.edge_count()})"
