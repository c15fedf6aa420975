# pointgraph/app/build.py
import time
from collections.abc import Mapping
from dataclasses import dataclass

from pointgraph.config.models import TourModel
from pointgraph.domain.entities.geography import Point
from pointgraph.domain.entities.steps import GreedyPath, PathPlan, TreeEdge
from pointgraph.domain.graph.distance_graph import DistanceGraph
from pointgraph.domain.graph.greedy import greedy_path
from pointgraph.io.recorder import Recorder
from pointgraph.io.tour_logging import TourLogging
from pointgraph.runtime.hooks import NoopHooks, TourHooks
from pointgraph.runtime.registries import make_walker


@dataclass
class TourReport:
    points: list[Point]
    graph: DistanceGraph
    tree: DistanceGraph
    tree_edges: list[TreeEdge]
    walk: PathPlan
    walk_policy: str
    greedy: GreedyPath | None

    @property
    def tree_weight(self) -> int:
        return sum(e.weight for e in self.tree_edges)


def build(
    cfg: TourModel | Mapping,
    *,
    hooks: TourHooks | None = None,
    recorder: Recorder | None = None,
    use_logging: bool = True,
) -> TourReport:
    # 0) Validate config
    model = cfg if isinstance(cfg, TourModel) else TourModel.model_validate(cfg)

    # 1) Hooks
    if hooks is None:
        hooks = (
            TourLogging(
                run_id=model.run_id,
                level=model.log.level,
                debug=model.log.debug,
                sample_every=model.log.sample_every,
                recorder=recorder,
            )
            if use_logging
            else NoopHooks()
        )

    t0 = time.perf_counter()
    points = [Point(x, y) for x, y in model.points]
    hooks.run_start(name=model.name, n=len(points), root=model.root)

    # 2) Complete graph and its spanning tree
    graph = DistanceGraph.from_points(points)
    tree_edges = graph.spanning_tree_steps(model.root)
    tree = DistanceGraph(graph.n, points)
    for e in tree_edges:
        tree.add_edge(e.child, e.parent, e.weight)
        hooks.tree_edge(e)

    # 3) Walk the tree
    walker = make_walker(model.walker, deps={"reference": graph})
    walk = walker.walk(tree, model.root)
    for s in walk.steps:
        hooks.walk_step(s, policy=walker.policy)

    # 4) Greedy path, independent of the tree
    greedy = None
    if model.greedy:
        greedy = greedy_path(points)
        for g in greedy.steps:
            hooks.greedy_step(g)

    report = TourReport(
        points=points,
        graph=graph,
        tree=tree,
        tree_edges=tree_edges,
        walk=walk,
        walk_policy=walker.policy,
        greedy=greedy,
    )
    hooks.run_end(
        tree_weight=report.tree_weight,
        walk_total=walk.total,
        greedy_total=greedy.total if greedy else None,
        wall_ms=(time.perf_counter() - t0) * 1000,
    )
    return report
