# runtime/hooks.py
from typing import Protocol

from pointgraph.domain.entities.steps import GreedyStep, PathStep, TreeEdge


class TourHooks(Protocol):
    def run_start(self, *, name, n, root): ...
    def run_end(self, *, tree_weight, walk_total, greedy_total, wall_ms): ...
    def tree_edge(self, edge: TreeEdge): ...
    def walk_step(self, step: PathStep, *, policy: str): ...
    def greedy_step(self, step: GreedyStep): ...


class NoopHooks:
    def run_start(self, **_):
        pass

    def run_end(self, **_):
        pass

    def tree_edge(self, *_, **__):
        pass

    def walk_step(self, *_, **__):
        pass

    def greedy_step(self, *_, **__):
        pass
