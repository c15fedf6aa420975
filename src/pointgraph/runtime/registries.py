# runtime/registries.py
from collections.abc import Callable

from pointgraph.app.protocols import TreeWalker
from pointgraph.config.models import (
    WalkerPointDistanceModel,
    WalkerReferenceGraphModel,
    WalkerUnion,
)
from pointgraph.domain.graph.traversal import PointDistanceWalker, ReferenceGraphWalker

WalkerFactory = Callable[[WalkerUnion, dict], TreeWalker]

_walker_registry: dict[str, WalkerFactory] = {}


# ---------------------- Tree Walkers ----------------------------


def register_walker(kind: str):
    def deco(fn: WalkerFactory):
        _walker_registry[kind] = fn
        return fn

    return deco


def make_walker(cfg: WalkerUnion, *, deps: dict) -> TreeWalker:
    """
    deps can include:
      - 'reference': DistanceGraph  # graph to charge hops against
    """
    try:
        factory = _walker_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown walker kind {cfg.kind!r}") from None
    return factory(cfg, deps)


@register_walker("reference_graph")
def _make_reference(cfg: WalkerReferenceGraphModel, deps):
    if "reference" not in deps:
        raise ValueError("reference_graph walker needs a 'reference' graph")
    return ReferenceGraphWalker(deps["reference"])


@register_walker("point_distance")
def _make_point_distance(cfg: WalkerPointDistanceModel, deps):
    return PointDistanceWalker()
