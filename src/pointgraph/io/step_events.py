# pointgraph/io/step_events.py

from dataclasses import dataclass


# Base type for renderer-facing step events
@dataclass
class StepEvent:
    run_id: str
    seq: int  # position within its own stream
    frac: float  # seq / n, for animated reveal timing
    name: str  # stable event name


@dataclass
class TreeEdgeAdded(StepEvent):
    child: int
    parent: int
    weight: int


@dataclass
class WalkStepTaken(StepEvent):
    policy: str
    src: int
    dst: int
    distance: int
    cumulative: int


@dataclass
class GreedyStepTaken(StepEvent):
    src: tuple[int, int]
    dst: tuple[int, int]
    distance: int
    cumulative: int
