# io/tour_logging.py
import json
import logging
import sys

from pointgraph.domain.entities.steps import GreedyStep, PathStep, TreeEdge
from pointgraph.io.recorder import Recorder
from pointgraph.io.step_events import GreedyStepTaken, TreeEdgeAdded, WalkStepTaken
from pointgraph.runtime.hooks import NoopHooks


def _default_json_logger(name="pointgraph", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class TourLogging(NoopHooks):
    """
    Structured logs for a tour run, plus step events for an optional recorder.
    Per-step lines are DEBUG only and sampled every `sample_every` steps.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1,
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.recorder = recorder
        self.log = logger or _default_json_logger(level=level)

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id, **extra}
        self.log.log(getattr(logging, level), msg, extra={"extra": payload})

    def _sampled(self, seq: int) -> bool:
        return self.debug and (seq % self.sample_every) == 0

    def _record(self, ev):
        if self.recorder:
            self.recorder.emit(ev)

    # --------------------------------------------------------

    def run_start(self, *, name: str, n: int, root: int):
        self._emit("INFO", "run_start", name=name, n=n, root=root)

    def run_end(
        self, *, tree_weight: int, walk_total: int, greedy_total: int | None, wall_ms: float
    ):
        self._emit(
            "INFO",
            "run_end",
            tree_weight=tree_weight,
            walk_total=walk_total,
            greedy_total=greedy_total,
            wall_ms=round(wall_ms, 3),
        )

    def tree_edge(self, edge: TreeEdge):
        if self._sampled(edge.seq):
            self._emit(
                "DEBUG", "tree_edge", child=edge.child, parent=edge.parent, weight=edge.weight
            )
        self._record(
            TreeEdgeAdded(
                run_id=self.run_id,
                seq=edge.seq,
                frac=edge.frac,
                name="tree_edge",
                child=edge.child,
                parent=edge.parent,
                weight=edge.weight,
            )
        )

    def walk_step(self, step: PathStep, *, policy: str):
        if self._sampled(step.seq):
            self._emit(
                "DEBUG",
                "walk_step",
                policy=policy,
                src=step.src,
                dst=step.dst,
                cumulative=step.cumulative,
            )
        self._record(
            WalkStepTaken(
                run_id=self.run_id,
                seq=step.seq,
                frac=step.frac,
                name="walk_step",
                policy=policy,
                src=step.src,
                dst=step.dst,
                distance=step.distance,
                cumulative=step.cumulative,
            )
        )

    def greedy_step(self, step: GreedyStep):
        if self._sampled(step.seq):
            self._emit(
                "DEBUG",
                "greedy_step",
                src=step.src.as_tuple(),
                dst=step.dst.as_tuple(),
                cumulative=step.cumulative,
            )
        self._record(
            GreedyStepTaken(
                run_id=self.run_id,
                seq=step.seq,
                frac=step.frac,
                name="greedy_step",
                src=step.src.as_tuple(),
                dst=step.dst.as_tuple(),
                distance=step.distance,
                cumulative=step.cumulative,
            )
        )
