from dataclasses import dataclass, field

from pointgraph.domain.entities.geography import Point


@dataclass(frozen=True)
class TreeEdge:
    """One Prim insertion: `child` joined the tree through `parent`."""

    child: int
    parent: int
    weight: int
    seq: int  # tree size after the insertion
    frac: float  # seq / n


@dataclass(frozen=True)
class PathStep:
    src: int
    dst: int
    seq: int  # nodes visited once this step lands
    frac: float  # seq / n
    distance: int
    cumulative: int


@dataclass
class PathPlan:
    root: int
    order: list[int] = field(default_factory=list)
    steps: list[PathStep] = field(default_factory=list)
    total: int = 0

    def edges(self) -> list[tuple[int, int]]:
        return [(s.src, s.dst) for s in self.steps]


@dataclass(frozen=True)
class GreedyStep:
    src: Point
    dst: Point
    seq: int
    frac: float
    distance: int
    cumulative: int


@dataclass
class GreedyPath:
    order: list[Point] = field(default_factory=list)
    steps: list[GreedyStep] = field(default_factory=list)
    total: int = 0
